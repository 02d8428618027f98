"""Tests for the command line entry point."""

from main import run_cli


def test_help(capsys):
    assert run_cli(['--help']) == 0
    assert 'Usage' in capsys.readouterr().out


def test_synthetic_single_pixel(capsys):
    assert run_cli(['--synthetic', 'single_pixel']) == 0
    assert '00fefefefefefefc' in capsys.readouterr().out


def test_image_file(tmp_path, png_bytes, capsys):
    path = tmp_path / 'noise.png'
    path.write_bytes(png_bytes)
    assert run_cli([str(path), '--method', 'scipy']) == 0
    assert 'pHash:' in capsys.readouterr().out


def test_corrupt_file(tmp_path, capsys):
    path = tmp_path / 'broken.png'
    path.write_bytes(b'not a png')
    assert run_cli([str(path)]) == 1
    assert 'Error' in capsys.readouterr().err


def test_missing_file(tmp_path):
    assert run_cli([str(tmp_path / 'nope.png')]) == 1


def test_bad_arguments():
    assert run_cli(['--method']) == 2
    assert run_cli(['a.png', 'b.png']) == 2
    assert run_cli(['--synthetic', 'unicorn']) == 2
    assert run_cli(['a.png', '--method', 'fftw']) == 2
