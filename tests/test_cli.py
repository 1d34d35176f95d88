import pytest

from fortuna import cli
from fortuna.ciphers import aes
from fortuna.generator import Generator


def expected_output(seed, total):
    gen = Generator(aes)
    gen.seed(seed)
    out = b""
    while len(out) < total:
        out += gen.pseudo_random_data(min(cli.CHUNK_SIZE, total - len(out)))
    return out


def test_seeded_output(tmp_path):
    path = tmp_path / "out.bin"
    cli.main(["-s", "42", "-l", "100", "-o", str(path), "-q"])
    assert path.read_bytes() == expected_output(42, 100)


def test_output_spans_chunks(tmp_path, monkeypatch):
    monkeypatch.setattr(cli, "CHUNK_SIZE", 64)
    path = tmp_path / "out.bin"
    cli.main(["--seed", "7", "--len", "1ki", "--output", str(path), "-q"])
    data = path.read_bytes()
    assert len(data) == 1024
    assert data == expected_output(7, 1024)


def test_unseeded_output_differs(tmp_path):
    a = tmp_path / "a.bin"
    b = tmp_path / "b.bin"
    cli.main(["-l", "64", "-o", str(a), "-q"])
    cli.main(["-l", "64", "-o", str(b), "-q"])
    assert len(a.read_bytes()) == 64
    assert a.read_bytes() != b.read_bytes()


def test_summary_on_stderr(tmp_path, capsys):
    cli.main(["-s", "1", "-l", "1k", "-o", str(tmp_path / "x.bin")])
    err = capsys.readouterr().err
    assert "[Fortuna] wrote 1 kB" in err
    assert "seed 1" in err


def test_dry_run(tmp_path, capsys):
    cli.main(["-s", "1", "-l", "4k", "--dry"])
    assert "generated 4 kB" in capsys.readouterr().err


@pytest.mark.parametrize(
    "argv",
    [
        ["-a", "twofish", "-l", "1", "--dry"],
        ["-l", "lots", "--dry"],
        ["-s", "nope", "-l", "1", "--dry"],
        ["-a", "sm4", "-l", "1", "--dry"],
    ],
)
def test_errors(argv, capsys):
    with pytest.raises(SystemExit) as exc_info:
        cli.main(argv)
    assert exc_info.value.code == 1
    assert capsys.readouterr().err.startswith("Error: ")
