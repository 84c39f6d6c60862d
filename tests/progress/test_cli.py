"""Tests for the progress-eta command line interface."""

import pytest
from click.testing import CliRunner

from progress_eta.progress.cli import progress


@pytest.fixture
def runner():
    return CliRunner()


class TestEstimateCommand:
    """Test the ``estimate`` command."""

    def test_estimate_without_smoothing(self, runner):
        result = runner.invoke(progress, [
            'estimate', '--progress', '50', '--elapsed', '13332', '--smoothing', '0'
        ])

        assert result.exit_code == 0
        assert ' ETA: 03:42:12' in result.output

    def test_estimate_with_smoothing(self, runner):
        result = runner.invoke(progress, [
            'estimate', '-p', '50', '-e', '13332', '-s', '0.5'
        ])

        assert result.exit_code == 0
        assert ' ETA: 03:51:16' in result.output

    def test_estimate_out_of_bounds_friendly(self, runner):
        result = runner.invoke(progress, [
            'estimate', '-p', '25', '-e', '120000', '-s', '0', '--out-of-bounds', 'friendly'
        ])

        assert result.exit_code == 0
        assert ' ETA: > 4 Days' in result.output

    def test_estimate_without_progress_is_unknown(self, runner):
        result = runner.invoke(progress, ['estimate', '-p', '0', '-e', '60'])

        assert result.exit_code == 0
        assert ' ETA: ??:??:??' in result.output

    def test_estimate_uses_config_file(self, runner, config_file):
        # total 10, smoothing 0 in the test configuration
        result = runner.invoke(progress, [
            '--config', str(config_file), 'estimate', '-p', '5', '-e', '50'
        ])

        assert result.exit_code == 0
        assert ' ETA: 00:00:50' in result.output

    def test_estimate_uses_environment(self, runner, monkeypatch):
        monkeypatch.setenv('PROGRESS_ETA_TOTAL', '10')
        monkeypatch.setenv('PROGRESS_ETA_SMOOTHING', '0.0')

        result = runner.invoke(progress, ['estimate', '-p', '5', '-e', '50'])

        assert result.exit_code == 0
        assert ' ETA: 00:00:50' in result.output

    def test_estimate_progress_above_total_fails(self, runner):
        result = runner.invoke(progress, ['estimate', '-p', '150', '-e', '10'])

        assert result.exit_code == 1
        assert 'greater than the total' in result.output

    def test_estimate_missing_config_file_fails(self, runner, temp_dir):
        missing = temp_dir / 'missing.yml'

        result = runner.invoke(progress, [
            '--config', str(missing), 'estimate', '-p', '1', '-e', '1'
        ])

        assert result.exit_code == 1
        assert 'Configuration file not found' in result.output

    def test_estimate_rejects_bad_smoothing(self, runner):
        result = runner.invoke(progress, ['estimate', '-p', '1', '-e', '1', '-s', '3'])

        assert result.exit_code == 2


class TestConfigCommand:
    """Test the ``config`` command."""

    def test_show_valid_config(self, runner, config_file):
        result = runner.invoke(progress, ['--config', str(config_file), 'config'])

        assert result.exit_code == 0
        assert 'smoothing' in result.output
        assert 'Configuration is valid' in result.output

    def test_show_invalid_config(self, runner, temp_dir):
        config_file = temp_dir / 'bad.yml'
        config_file.write_text("progress:\n  smoothing: 4\n  title: Downloading\n")

        result = runner.invoke(progress, ['--config', str(config_file), 'config'])

        assert result.exit_code == 1
        assert 'Unknown progress option: title' in result.output
