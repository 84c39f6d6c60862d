"""Core framework components: exceptions, logging and configuration."""
