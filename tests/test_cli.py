#!/usr/bin/env python3
"""
test_cli.py — end-to-end checks for booltable.py, config.py and render.py

What it does
------------
1) Feeds good and malformed lines through run_line() and checks that bad
   lines are reported on stderr without stopping anything.
2) Runs batch files and the interactive loop through main().
3) Renders a table to PPM and reads it back with PIL.
4) Checks environment and flag handling of the variable ceiling.

Run:
  pytest tests/test_cli.py
"""

import io
import os
import sys
import tempfile
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path
from unittest import mock

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from PIL import Image

import booltable
import config
from core import evaluate_line
from render import BLACK, BLUE, GREY, WHITE, UPSCALE, render_table, table_grid

def _run_line(text, cfg=None):
    out, err = io.StringIO(), io.StringIO()
    with redirect_stderr(err):
        ok = booltable.run_line(text, cfg or config.Config(), out)
    return ok, out.getvalue(), err.getvalue()

def _main(argv):
    out, err = io.StringIO(), io.StringIO()
    with redirect_stdout(out), redirect_stderr(err):
        status = booltable.main(argv)
    return status, out.getvalue(), err.getvalue()

def _write(directory, name, text):
    path = os.path.join(directory, name)
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)
    return path

def test_run_line_prints_table():
    ok, out, err = _run_line("a AND b = out")
    assert ok and err == ""
    assert out.splitlines()[0] == "| a | b | out |"
    assert out.splitlines()[-1] == "| 1 | 1 | 1   |"

def test_run_line_reports_bad_input():
    ok, out, err = _run_line("a AND = out")
    assert not ok and out == ""
    assert err.strip() == "Error: invalid expression at column 7", err

def test_show_ast():
    ok, out, _ = _run_line("a OR b AND c = z", config.Config(show_ast=True))
    assert ok
    assert out.splitlines()[0] == "(a OR (b AND c)) = z"

def test_ceiling_from_config():
    ok, _, err = _run_line("a AND b AND c = z", config.Config(max_variables=2))
    assert not ok
    assert "expression too large" in err

def test_batch_file_status():
    with tempfile.TemporaryDirectory() as d:
        good = _write(d, "good.txt", "# comment\na AND b = x\n\n¬a ⊕ b -> y\n")
        bad = _write(d, "bad.txt", "a AND b = x\na AND = y\n(c = z\n")
        status, out, _ = _main([good])
        assert status == 0
        assert "| a | b | x |" in out and "| a | b | y |" in out
        status, out, err = _main([bad])
        assert status == 1
        assert "| a | b | x |" in out
        assert "2 line(s) failed: 2, 3" in err, err

def test_usage_errors():
    with tempfile.TemporaryDirectory() as d:
        status, _, err = _main([os.path.join(d, "missing.txt")])
        assert status == 2 and "input file not found" in err
        status, _, err = _main(["--image", os.path.join(d, "table.png")])
        assert status == 2 and ".ppm" in err

def test_repl_loop():
    lines = iter(["a XOR b = q", "", "oops (", "quit", "a = never"])
    with mock.patch("builtins.input", side_effect=lambda prompt: next(lines)):
        status, out, err = _main([])
    assert status == 0
    assert "| a | b | q |" in out
    assert "never" not in out
    assert err.count("Error:") == 1

def test_repl_stops_at_eof():
    with mock.patch("builtins.input", side_effect=EOFError):
        status, _, _ = _main([])
    assert status == 0

def test_render_table():
    table = evaluate_line("a AND b = out")
    with tempfile.TemporaryDirectory() as d:
        path = os.path.join(d, "t.ppm")
        render_table(table, path)
        img = Image.open(path).convert("RGB")
        # 2 inputs + separator + output, 4 rows + header band
        assert img.size == (4 * UPSCALE, 5 * UPSCALE), img.size
        px = lambda x, y: img.getpixel((x * UPSCALE, y * UPSCALE))
        assert px(0, 0) == BLUE
        assert px(0, 1) == WHITE and px(3, 1) == WHITE
        assert px(2, 2) == GREY
        assert px(0, 4) == BLACK and px(1, 4) == BLACK and px(3, 4) == BLACK

def test_table_grid_without_variables():
    grid = table_grid(evaluate_line("true = k"))
    # separator + output, one row + header band
    assert (grid.w, grid.h) == (2, 2)
    assert grid.img.getpixel((0, 0)) == BLUE
    assert grid.img.getpixel((0, 1)) == GREY
    assert grid.img.getpixel((1, 1)) == BLACK

def test_image_flag_writes_latest_table():
    with tempfile.TemporaryDirectory() as d:
        src = _write(d, "eqs.txt", "a = x\na OR b OR c = y\n")
        image = os.path.join(d, "out.ppm")
        status, _, _ = _main(["--image", image, src])
        assert status == 0
        img = Image.open(image)
        assert img.size == (5 * UPSCALE, 9 * UPSCALE), img.size

def test_config_from_env():
    assert config.from_env({}).max_variables == config.DEFAULT_MAX_VARIABLES
    assert config.from_env({config.ENV_MAX_VARS: "3"}).max_variables == 3
    assert config.from_env({config.ENV_MAX_VARS: "0"}).max_variables is None
    try:
        config.from_env({config.ENV_MAX_VARS: "many"})
    except ValueError:
        pass
    else:
        raise AssertionError("expected ValueError")

def test_flags_override_env():
    args = booltable.build_arg_parser().parse_args(["--max-vars", "0", "--show-ast"])
    cfg = config.apply_args(config.from_env({config.ENV_MAX_VARS: "3"}), args)
    assert cfg.max_variables is None
    assert cfg.show_ast and cfg.image_path is None

def test_bad_env_is_usage_error():
    with mock.patch.dict(os.environ, {config.ENV_MAX_VARS: "lots"}):
        status, _, err = _main([])
    assert status == 2 and config.ENV_MAX_VARS in err

def test_equation_files():
    import run_tests
    eq_dir = os.path.join(str(ROOT), "tests", "equations")
    script = os.path.join(str(ROOT), "booltable.py")
    for name in run_tests.find_tests(eq_dir):
        path = os.path.join(eq_dir, name)
        assert run_tests.run_test(path, script) == run_tests.expected_status(path), name

def run_all():
    tests = [
        test_run_line_prints_table, test_run_line_reports_bad_input, test_show_ast,
        test_ceiling_from_config, test_batch_file_status, test_usage_errors, test_repl_loop,
        test_repl_stops_at_eof, test_render_table, test_table_grid_without_variables,
        test_image_flag_writes_latest_table,
        test_config_from_env, test_flags_override_env, test_bad_env_is_usage_error,
        test_equation_files,
    ]
    passed = 0
    for t in tests:
        try:
            t()
            print(f"[PASS] {t.__name__}")
            passed += 1
        except Exception as e:
            print(f"[FAIL] {t.__name__}: {e}")
    total = len(tests)
    print(f"\n[SUMMARY] {passed} passed, {total - passed} failed (total {total})")
    return 0 if passed == total else 1

if __name__ == "__main__":
    sys.exit(run_all())
