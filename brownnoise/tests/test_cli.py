import logging
import numpy as np
import pytest
import soundfile as sf
from brownnoise import cli
from brownnoise.wav import read_wav

def test_defaults():
    args = cli.build_parser().parse_args([])
    assert args.output == "brown_noise.wav"
    assert args.duration == 10.0
    assert args.sample_rate == 44100
    assert args.amplitude == 0.5
    assert args.seed is None

def test_writes_file(tmp_path, capsys):
    out = tmp_path / "out.wav"
    cli.main(["-o", str(out), "-d", "0.5", "-s", "8000", "-a", "0.3", "--seed", "1"])

    info = sf.info(str(out))
    assert info.frames == 4000
    assert info.samplerate == 8000
    assert info.channels == 1
    assert info.subtype == "PCM_16"
    assert f"Brown noise generated and saved to {out}" in capsys.readouterr().out

def test_seed_is_reproducible(tmp_path):
    a, b = tmp_path / "a.wav", tmp_path / "b.wav"
    cli.main(["-o", str(a), "-d", "0.2", "--seed", "7"])
    cli.main(["-o", str(b), "-d", "0.2", "--seed", "7"])
    assert np.array_equal(read_wav(a)[0], read_wav(b)[0])

def test_zero_duration_writes_empty_file(tmp_path, caplog):
    out = tmp_path / "empty.wav"
    with caplog.at_level(logging.WARNING):
        cli.main(["-o", str(out), "-d", "0"])
    assert sf.info(str(out)).frames == 0
    assert "empty file" in caplog.text

def test_verify_reports_result(tmp_path, caplog):
    out = tmp_path / "checked.wav"
    with caplog.at_level(logging.INFO):
        cli.main(["-o", str(out), "-d", "5", "--seed", "3", "--verify"])
    assert "Spectral check passed" in caplog.text

def test_unwritable_path_exits(tmp_path):
    out = tmp_path / "missing" / "out.wav"
    with pytest.raises(SystemExit) as exc:
        cli.main(["-o", str(out), "-d", "0.1"])
    assert exc.value.code == 1

def test_non_numeric_duration_rejected():
    with pytest.raises(SystemExit) as exc:
        cli.main(["-d", "long"])
    assert exc.value.code == 2
