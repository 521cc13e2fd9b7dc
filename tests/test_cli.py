import json

from click.testing import CliRunner

from fibheap.__main__ import main
from fibheap.config import reset_config


def test_sort():
    result = CliRunner().invoke(main, ['sort', '5', '3', '8', '1', '9', '2'])
    assert result.exit_code == 0
    assert result.output == '1 2 3 5 8 9\n'


def test_view():
    result = CliRunner().invoke(main,
                                ['view', '--pop', '1', '0', '1', '2', '3', '4'])
    assert result.exit_code == 0
    assert 'ranks: [0, 0, 1]' in result.output
    assert 'potential: 1' in result.output


def test_audit():
    result = CliRunner().invoke(
        main, ['audit', '-n', '50', '-n', '100', '-n', '200', '-s', '1'])
    assert result.exit_code == 0
    assert 'n = 200' in result.output
    assert 'delete_min actual cost ~' in result.output


def test_config_option(tmp_path):
    path = tmp_path / 'cfg.json'
    path.write_text(json.dumps({'consolidate': {'slack': 3}}))
    try:
        result = CliRunner().invoke(main,
                                    ['--config', str(path), 'sort', '2', '1'])
        assert result.exit_code == 0
        assert result.output == '1 2\n'
    finally:
        reset_config()
