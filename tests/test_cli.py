from click.testing import CliRunner

from shamirkit import Secret
from shamirkit.cli import main


def _split(runner, *args):
    result = runner.invoke(main, ["split", *args])
    assert result.exit_code == 0, result.output
    return result.output.split()


def test_split_and_combine_roundtrip():
    runner = CliRunner()
    secret = Secret(12345)
    shares = _split(runner, "-k", "3", "-n", "5", "--secret", secret.encode())
    assert len(shares) == 5

    result = runner.invoke(main, ["combine", "-k", "3", shares[0], shares[2], shares[4]])
    assert result.exit_code == 0, result.output
    assert result.output.strip() == secret.encode()


def test_integer_format_and_stdin():
    runner = CliRunner()
    shares = _split(runner, "-k", "2", "-n", "3", "--secret", "987654321", "--format", "integer")
    result = runner.invoke(
        main,
        ["combine", "-k", "2", "--format", "integer"],
        input="\n".join(shares[1:]) + "\n",
    )
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "987654321"


def test_secret_prompted_when_missing():
    runner = CliRunner()
    result = runner.invoke(main, ["split", "-k", "2", "-n", "2"], input=Secret(42).encode() + "\n")
    assert result.exit_code == 0, result.output


def test_random_secret_split():
    runner = CliRunner()
    result = runner.invoke(main, ["split", "-k", "2", "-n", "3", "--random"])
    assert result.exit_code == 0, result.output


def test_combine_with_too_few_shares_fails():
    runner = CliRunner()
    shares = _split(runner, "-k", "3", "-n", "5", "--secret", Secret(777).encode())
    result = runner.invoke(main, ["combine", "-k", "3", shares[0], shares[1]])
    assert result.exit_code == 1
    assert "need 3 shares" in result.output


def test_invalid_secret_reported():
    runner = CliRunner()
    result = runner.invoke(main, ["split", "-k", "2", "-n", "3", "--secret", "!!"])
    assert result.exit_code == 1
    assert "Error" in result.output


def test_invalid_threshold_reported():
    runner = CliRunner()
    result = runner.invoke(main, ["split", "-k", "4", "-n", "3", "--secret", Secret(1).encode()])
    assert result.exit_code == 1


def test_generate_tag_and_verify():
    runner = CliRunner()
    generated = runner.invoke(main, ["generate", "--bits", "64"])
    assert generated.exit_code == 0
    encoded = generated.output.strip()
    assert Secret.decode(encoded).bit_length == 65

    tag = runner.invoke(main, ["tag", encoded]).output.strip()
    assert tag == Secret.decode(encoded).integrity_tag

    ok = runner.invoke(main, ["verify", encoded, tag])
    assert ok.exit_code == 0
    assert ok.output.strip() == "ok"

    bad = runner.invoke(main, ["verify", encoded, "00" * 32])
    assert bad.exit_code == 1


def test_combine_reads_share_file(tmp_path):
    runner = CliRunner()
    shares = _split(runner, "-k", "2", "-n", "4", "--secret", Secret(2024).encode())
    share_file = tmp_path / "shares.txt"
    share_file.write_text("\n".join(shares[2:]) + "\n\n")

    result = runner.invoke(main, ["combine", "-k", "2", "-i", str(share_file)])
    assert result.exit_code == 0, result.output
    assert result.output.strip() == Secret(2024).encode()


def test_small_secret_with_many_shares():
    runner = CliRunner()
    shares = _split(runner, "-k", "2", "-n", "20", "--secret", "1", "--format", "integer")
    assert len(shares) == 20
    result = runner.invoke(main, ["combine", "-k", "2", "--format", "integer", shares[7], shares[19]])
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "1"
