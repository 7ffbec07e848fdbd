import io

from run_uefi_app import console


class FakeTerminal(io.StringIO):
    def isatty(self):
        return True


def test_format_command_puts_each_argument_on_its_own_line():
    formatted = console.format_command(["qemu", "-drive", "file=a b"])
    assert formatted == 'qemu \\\n    -drive \\\n    "file=a b"'


def test_info_goes_to_stdout(capsys):
    console.info("Staged boot image")
    captured = capsys.readouterr()
    assert captured.out == "Info: Staged boot image\n"
    assert captured.err == ""


def test_error_goes_to_stderr(capsys):
    console.error("OVMF.fd missing")
    captured = capsys.readouterr()
    assert captured.err == "Error: OVMF.fd missing\n"
    assert captured.out == ""


def test_listing_uses_plain_newlines(capsys):
    console.listing("Binary targets:", ["a", "b"])
    assert capsys.readouterr().out == "Binary targets:\n  - a\n  - b\n"


def test_listing_with_no_items_prints_only_title(capsys):
    console.listing("Binary targets:", [])
    assert capsys.readouterr().out == "Binary targets:\n"


def test_command_block_layout(capsys):
    console.command(["qemu", "-m", "512M"])
    assert capsys.readouterr().out == (
        "--- Starting QEMU with the following command ---\n"
        "qemu \\\n    -m \\\n    512M\n"
        + "-" * 50 + "\n"
    )


def test_terminal_output_goes_through_prompt_toolkit(monkeypatch):
    calls = []
    terminal = FakeTerminal()
    monkeypatch.setattr(console.sys, "stdout", terminal)
    monkeypatch.setattr(console, "print_formatted_text", lambda text, **kwargs: calls.append((text, kwargs)))
    console.info("hello")
    assert terminal.getvalue() == ""
    (text, kwargs), = calls
    assert list(text) == [("class:info", "Info: "), ("", "hello")]
    assert kwargs["file"] is terminal
    assert kwargs["style"] is console.console_style
