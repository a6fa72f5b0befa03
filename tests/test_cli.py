import pytest

from course_planner import cli


def scripted(*answers):
    """Prompt function replaying `answers`, then signalling end of input."""
    remaining = list(answers)

    def prompt(_message):
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    return prompt


def test_full_session(store, catalog_file, capsys):
    cli.run_menu(store, scripted('1', str(catalog_file), '2', '3', 'csci300', '9'))
    out = capsys.readouterr().out

    assert 'Loaded 4 courses with 1 missing prerequisite reference(s).' in out
    assert 'Here is a sample schedule:\nCSCI101, Introduction to Programming\n' in out
    assert 'CSCI300, Algorithms\nPrerequisites: CSCI200, MATH999\n' in out
    assert 'Prerequisite titles: Data Structures, (missing: MATH999)' in out
    assert out.rstrip().endswith('Thank you for using the course planner!')


@pytest.mark.parametrize('choice', ['2', '3'])
def test_queries_before_load(store, capsys, choice):
    cli.run_menu(store, scripted(choice))
    assert cli.NOT_LOADED_MESSAGE in capsys.readouterr().out


def test_detail_errors_keep_menu_running(loaded_store, capsys):
    cli.run_menu(loaded_store, scripted('3', 'PHYS999', '3', '   ', '9'))
    out = capsys.readouterr().out
    assert 'Course PHYS999 not found.' in out
    assert 'Please enter a course number.' in out
    assert 'Thank you for using the course planner!' in out


def test_invalid_option(store, capsys):
    cli.run_menu(store, scripted('7', 'abc'))
    out = capsys.readouterr().out
    assert '7 is not a valid option.' in out
    assert 'abc is not a valid option.' in out


def test_empty_file_name(store, capsys):
    cli.run_menu(store, scripted('1', '  '))
    assert 'No file name entered.' in capsys.readouterr().out
    assert not store.is_loaded


def test_failed_load_reported_on_stderr_only(store, tmp_path, capsys):
    cli.run_menu(store, scripted('1', str(tmp_path / 'missing.txt'), '2'))
    captured = capsys.readouterr()
    assert 'Loaded' not in captured.out
    assert cli.NOT_LOADED_MESSAGE in captured.out


def test_main_preloads_catalog(catalog_file, monkeypatch, capsys):
    monkeypatch.setattr('builtins.input', scripted('2', '9'))
    assert cli.main(['--catalog', str(catalog_file)]) == 0
    out = capsys.readouterr().out
    assert out.startswith('Loaded 4 courses')
    assert 'MATH201, Discrete Math' in out


@pytest.mark.parametrize(
    ('answer', 'expected'),
    [('1', 1), ('01', 1), (' 2x', 2), ('+9', 9), ('-3', -3), ('abc', None), ('x2', None)],
)
def test_parse_choice(answer, expected):
    assert cli.parse_choice(answer) == expected


def test_choice_with_leading_zero_or_suffix(loaded_store, capsys):
    cli.run_menu(loaded_store, scripted('02', '3x', 'math201', '09'))
    out = capsys.readouterr().out
    assert 'Here is a sample schedule:' in out
    assert 'MATH201, Discrete Math\nPrerequisites: None' in out
    assert 'Thank you for using the course planner!' in out


def test_numeric_choice_echoed_as_number(store, capsys):
    cli.run_menu(store, scripted('007'))
    assert '7 is not a valid option.' in capsys.readouterr().out


def test_invalid_log_level_rejected(capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(['--log-level', 'verbose'])
    assert excinfo.value.code == 2
    assert "invalid choice: 'VERBOSE'" in capsys.readouterr().err


def test_log_level_case_insensitive(monkeypatch):
    levels = []
    monkeypatch.setattr(cli, 'configure_logging', levels.append)
    monkeypatch.setattr('builtins.input', scripted('9'))
    assert cli.main(['--log-level', 'debug']) == 0
    assert levels == ['DEBUG']


def test_log_level_defaults_to_settings(monkeypatch):
    levels = []
    monkeypatch.setattr(cli.settings, 'log_level', 'error')
    monkeypatch.setattr(cli, 'configure_logging', levels.append)
    monkeypatch.setattr('builtins.input', scripted('9'))
    assert cli.main([]) == 0
    assert levels == ['ERROR']
