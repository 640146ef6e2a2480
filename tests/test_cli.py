from __future__ import annotations

import json

from cyrcipher.cli import cli


def _invoke(runner, args, **kwargs):
    return runner.invoke(cli, args, obj={}, **kwargs)


class TestEncryptDecrypt:
    def test_encrypt_shift(self, runner):
        result = _invoke(runner, ["-q", "encrypt", "-C", "shift", "-k", "Б", "всем привет"])
        assert result.exit_code == 0, result.output
        assert "Encrypted: ГТЁНРСЙГЁУ" in result.output

    def test_decrypt_table(self, runner):
        result = _invoke(runner, ["-q", "decrypt", "-C", "table", "-k", "3", "ЕРЕСПВВМИТ"])
        assert result.exit_code == 0, result.output
        assert "Decrypted: ВСЕМПРИВЕТ" in result.output

    def test_banner_shown_by_default(self, runner):
        result = _invoke(runner, ["encrypt", "-k", "Б", "мир"])
        assert result.exit_code == 0, result.output
        assert "CyrCipher" in result.output

    def test_json_output(self, runner):
        result = _invoke(
            runner, ["-o", "json", "encrypt", "-C", "shift", "-k", "Я", "ВСЕМПРИВЕТ"]
        )
        assert result.exit_code == 0, result.output
        payload = json.loads(result.output)
        assert payload["output_text"] == "БРДЛОПЗБДС"
        assert payload["cipher"] == "shift"
        assert payload["key"] == "Я"

    def test_cipher_error_exits_1(self, runner):
        result = _invoke(runner, ["-q", "decrypt", "-k", "Б", "гтё"])
        assert result.exit_code == 1
        assert "Invalid cipher text" in result.output

    def test_cipher_error_reported_once(self, runner):
        result = _invoke(runner, ["-q", "decrypt", "-k", "Б", "гтё"])
        assert result.exit_code == 1
        assert result.output.count("Invalid cipher text") == 1

    def test_json_cipher_error(self, runner):
        result = _invoke(runner, ["-o", "json", "decrypt", "-k", "Б", "гтё"])
        assert result.exit_code == 1
        payload = json.loads(result.output)
        assert payload["kind"] == "invalid_cipher_text_character"
        assert payload["error"].startswith("Invalid cipher text")

    def test_key_error_exits_1(self, runner):
        result = _invoke(runner, ["-q", "encrypt", "-C", "table", "-k", "1", "МИР"])
        assert result.exit_code == 1
        assert "greater than 1" in result.output

    def test_missing_key_is_usage_error(self, runner):
        result = _invoke(runner, ["-q", "encrypt", "МИР"])
        assert result.exit_code == 2
        assert "No key given" in result.output

    def test_defaults_from_config(self, runner, tmp_path):
        path = tmp_path / "cyr.toml"
        path.write_text(
            '[global]\ndefault_cipher = "table"\n[table]\ndefault_cols = 5\n',
            encoding="utf-8",
        )
        result = _invoke(runner, ["-q", "-c", str(path), "encrypt", "ВСЕМПРИВЕТ"])
        assert result.exit_code == 0, result.output
        assert "Encrypted: ПТМЕЕВСИВР" in result.output


class TestCheck:
    def test_default_samples(self, runner):
        result = _invoke(runner, ["-q", "check", "-C", "table", "-k", "3"])
        assert result.exit_code == 0, result.output
        assert "4/4 checks passed" in result.output

    def test_corrupt(self, runner):
        result = _invoke(runner, ["-q", "check", "-C", "shift", "-k", "КЛЮЧ", "--corrupt", "ПРИВЕТ"])
        assert result.exit_code == 0, result.output
        assert "1/1 checks passed" in result.output

    def test_failure_exits_1(self, runner):
        result = _invoke(runner, ["-q", "check", "-k", "ААА", "ПРИВЕТ"])
        assert result.exit_code == 1

    def test_json(self, runner):
        result = _invoke(runner, ["-o", "json", "check", "-C", "table", "-k", "2", "МИР", "ДОМ"])
        assert result.exit_code == 0, result.output
        payload = json.loads(result.output)
        assert payload["total"] == 2
        assert payload["passed"] == 2
        assert payload["results"][0]["decrypted"] == "МИР"


class TestShell:
    def test_session(self, runner):
        session = "\n".join(
            [
                "Б",            # key
                "1", "всем привет",
                "2", "ГТЁНРСЙГЁУ",
                "2", "гтё",     # rejected, loop continues
                "7",            # unknown mode
                "0",
            ]
        ) + "\n"
        result = _invoke(runner, ["-q", "shell", "-C", "shift"], input=session)
        assert result.exit_code == 0, result.output
        assert "Key loaded: Б" in result.output
        assert "Encrypted: ГТЁНРСЙГЁУ" in result.output
        assert "Decrypted: ВСЕМПРИВЕТ" in result.output
        assert "Invalid cipher text" in result.output
        assert "Invalid mode." in result.output

    def test_key_option_skips_prompt(self, runner):
        result = _invoke(
            runner, ["-q", "shell", "-C", "table", "-k", "3"], input="2\nЫТ\n0\n"
        )
        assert result.exit_code == 0, result.output
        assert "Decrypted: ТЫ" in result.output

    def test_bad_key_ends_session(self, runner):
        result = _invoke(runner, ["-q", "shell", "-C", "shift"], input="ААА\n1\nмир\n")
        assert result.exit_code == 1
        assert "Cipher initialisation failed" in result.output
        assert "Encrypted" not in result.output

    def test_non_integer_columns(self, runner):
        result = _invoke(runner, ["-q", "shell", "-C", "table"], input="три\n")
        assert result.exit_code == 1
        assert "must be an integer" in result.output

    def test_end_of_input_exits_cleanly(self, runner):
        result = _invoke(runner, ["-q", "shell", "-C", "table", "-k", "4"], input="1\nпривет\n")
        assert result.exit_code == 0, result.output
        assert "Encrypted: ВИРТПЕ" in result.output
