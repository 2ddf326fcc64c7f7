from pathlib import Path

import pytest

from pazzfraze.main import main, parse_args
from pazzfraze.ui import PazzfrazeUI


@pytest.fixture()
def wordlist_file(tmp_path):
    path = tmp_path / 'words.txt'
    path.write_text("correct\nhorse\nbattery\nstaple\n", encoding='utf-8')
    return path


@pytest.fixture()
def config_file(tmp_path):
    return tmp_path / 'pazzfraze.conf'


@pytest.fixture()
def run(wordlist_file, config_file, capsys):

    def run_main(*options, master="hunter2", domain="example.com", wordlist=None):
        main(['-C', str(config_file), '-i', '1', *options,
              str(wordlist or wordlist_file), master, domain])
        return capsys.readouterr()

    return run_main


def test_generate(run):
    captured = run('-l', '4')
    assert captured.out == "CorrectHorseHorseBattery\n"
    assert "Generated password with 8.0 bits of entropy in " in captured.err
    assert "Remember to clear the terminal afterwards" in captured.err


@pytest.mark.parametrize("options, expected", [
    (('-c',), "correctHorseHorseBattery"),
    (('-s', '-'), "correct-horse-horse-battery"),
    (('--concat',), "correcthorsehorsebattery"),
    (('-c', '-p'), "CorrectHorseHorseBattery"),
    (('-e', '8'), "CorrectHorseHorseBattery"),
    (('-l', '2', '-e', '8'), "CorrectHorseHorseBattery"),
    (('-e', '8', '-l', '2'), "CorrectHorse"),
])
def test_options(run, options, expected):
    captured = run('-l', '4', *options)
    assert captured.out == expected + "\n"


def test_concat_without_separator_before_option(run):
    captured = run('-s', '-l', '4')
    assert captured.out == "correcthorsehorsebattery\n"


def test_default_entropy(run):
    captured = run()
    assert captured.out.count('\n') == 1
    assert len(captured.out.strip()) > 24
    assert "48.0 bits" in captured.err


def test_master_with_dash(run):
    captured = run('-l', '4', master='-x')
    assert len(captured.out.strip()) > 0


def test_settings_file(run, config_file):
    config_file.write_text("[pazzfraze]\n"
                           "style = concat\n"
                           "separator = -\n"
                           "length = 4\n", encoding='utf-8')
    captured = run()
    assert captured.out == "correct-horse-horse-battery\n"
    # command line options come after settings
    captured = run('-c')
    assert captured.out == "correctHorseHorseBattery\n"


def test_settings_file_invalid(run, config_file):
    config_file.write_text("[pazzfraze]\nentropy = lots\n", encoding='utf-8')
    captured = run()
    assert captured.out == ""
    assert "invalid value for [pazzfraze] 'entropy'" in captured.err


def test_settings_file_unknown_key(run, config_file, caplog):
    config_file.write_text("[pazzfraze]\ncolour = red\n[other]\n", encoding='utf-8')
    captured = run('-l', '4')
    assert captured.out == "CorrectHorseHorseBattery\n"
    assert "unknown key" in caplog.text
    assert "unknown section" in caplog.text


def test_missing_wordlist(run, tmp_path):
    captured = run(wordlist=tmp_path / 'missing.txt')
    assert captured.out == ""
    assert 'failed to open wordlist at "' in captured.err


def test_empty_wordlist(run, tmp_path):
    path = tmp_path / 'empty.txt'
    path.write_text(" \n\t\n", encoding='utf-8')
    captured = run(wordlist=path)
    assert captured.out == ""
    assert f'no words found in wordlist at "{path}"' in captured.err


def test_invalid_value(run):
    captured = run('-l', '-3')
    assert captured.out == ""
    assert "word count must not be negative" in captured.err


def test_usage_error(run):
    with pytest.raises(SystemExit):
        run('-e', 'lots')
    with pytest.raises(SystemExit):
        main(['only-two', 'args'])


def test_prompt_master(run, monkeypatch):
    answers = ["hunter2", "hunter2"]
    monkeypatch.setattr(PazzfrazeUI, '_input_pass', lambda _self, _prompt: answers.pop(0))
    captured = run('-l', '4', master='-')
    assert captured.out == "CorrectHorseHorseBattery\n"
    assert not answers


def test_prompt_master_mismatch(run, monkeypatch):
    answers = ["hunter2", "hunter3"]
    monkeypatch.setattr(PazzfrazeUI, '_input_pass', lambda _self, _prompt: answers.pop(0))
    captured = run('-l', '4', master='-')
    assert captured.out == ""
    assert "Passwords don't match" in captured.err


def test_prompt_master_canceled(run, monkeypatch):
    def cancel(_self, _prompt):
        raise KeyboardInterrupt
    monkeypatch.setattr(PazzfrazeUI, '_input_pass', cancel)
    captured = run(master='-')
    assert captured.out == ""


def test_copy(run, monkeypatch):
    copied = []
    monkeypatch.setattr(PazzfrazeUI, '_copy', lambda _self, text: copied.append(text))
    captured = run('-l', '4', '--copy')
    assert captured.out == ""
    assert copied == ["CorrectHorseHorseBattery"]
    assert "Password copied to clipboard." in captured.err


def test_parse_args():
    args = parse_args(['-c', '-s', '_', '-e', '40', 'words.txt', 'm', 'd'])
    assert args.steps == [('with_style_camel', ()), ('with_style_concat', ('_',)),
                          ('with_entropy', (40.0,))]
    assert (args.wordlist, args.master, args.domain) == ('words.txt', 'm', 'd')
    assert args.copy is False
    assert Path(args.config_file).name == 'pazzfraze.conf'
    args = parse_args(['words.txt', 'm', 'd'])
    assert args.steps == []
