import io

from bstree.menu import main, render_menu, run_menu


def test_render_menu_frame():
    text = render_menu()
    assert text.startswith("-------------MENU--------------\n")
    assert text.endswith("-------------------------------\nPilihan Anda: ")
    assert "10. Membandingkan 2 Node Tree\n" in text


def test_exit_choice_stops():
    out = io.StringIO()
    choices = run_menu(["0\n"], out)
    assert choices == [0]
    assert out.getvalue() == render_menu() + "Program selesai.\n"


def test_lines_after_exit_are_not_read():
    out = io.StringIO()
    remaining = iter(["3\n", "0\n", "5\n"])
    choices = run_menu(remaining, out)
    assert choices == [3, 0]
    assert list(remaining) == ["5\n"]


def test_valid_choices_print_nothing_extra():
    out = io.StringIO()
    lines = [f"{n}\n" for n in range(1, 11)] + ["0\n"]
    run_menu(lines, out)
    text = out.getvalue()
    assert text.count(render_menu()) == len(lines)
    assert "Pilihan tidak valid!" not in text


def test_invalid_choices_are_reported():
    out = io.StringIO()
    choices = run_menu(["11\n", "abc\n", "-1\n", "0\n"], out)
    assert choices == [11, None, -1, 0]
    assert out.getvalue().count("Pilihan tidak valid!\n") == 3


def test_number_prefix_is_accepted():
    out = io.StringIO()
    assert run_menu(["  0xyz\n"], out) == [0]
    assert out.getvalue().endswith("Program selesai.\n")


def test_end_of_input_stops_without_exit_message():
    out = io.StringIO()
    choices = run_menu(["2\n"], out)
    assert choices == [2]
    assert out.getvalue() == render_menu() * 2


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("4\n0\n"))
    assert main([]) == 0
    captured = capsys.readouterr().out
    assert captured.count(render_menu()) == 2
    assert captured.endswith("Program selesai.\n")