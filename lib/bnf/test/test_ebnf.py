# Copyright (c) 2012--2013 King's College London
# Created by the Software Development Team <http://soft-dev.org/>
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to
# deal in the Software without restriction, including without limitation the
# rights to use, copy, modify, merge, publish, distribute, sublicense, and/or
# sell copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in
# all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING
# FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS
# IN THE SOFTWARE.

import io

import pytest

from bnf import ebnf

grammar = """
grammar g;
productions {
    S : 'a' S | 'b' ;
}
"""

def write(tmp_path, text):
    path = tmp_path / "grammar.bnf"
    path.write_text(text, encoding="utf-8")
    return str(path)

def test_flat_output(tmp_path):
    out = io.StringIO()
    assert ebnf.main([write(tmp_path, grammar)], out=out) == 0
    lines = out.getvalue().splitlines()
    assert lines[0] == "(ASTNode Root Node)"
    assert lines[1] == "    (ASTNode Grammar: g)"
    assert "┗╸" not in out.getvalue()

def test_tree_output(tmp_path):
    out = io.StringIO()
    assert ebnf.main([write(tmp_path, grammar), "--tree"], out=out) == 0
    lines = out.getvalue().splitlines()
    assert lines[:3] == ["Root Node", "┣╸Grammar: g", "┗╸Production[1]"]
    assert "(ASTNode" not in out.getvalue()

def test_missing_file(tmp_path, caplog):
    assert ebnf.main([str(tmp_path / "nope.bnf")], out=io.StringIO()) == 1
    assert "failed to open file" in caplog.text

def test_parse_error(tmp_path, caplog):
    out = io.StringIO()
    assert ebnf.main([write(tmp_path, "productions {\n  S : }\n")], out=out) == 1
    assert out.getvalue() == ""
    assert "Invalid input grammar" in caplog.text
    assert "line 2" in caplog.text

def test_usage_error():
    with pytest.raises(SystemExit) as excinfo:
        ebnf.main([])
    assert excinfo.value.code == 2

def test_nesting_too_deep(tmp_path, caplog):
    text = "productions { S : " + "[" * 1000 + "'a'" + "]" * 1000 + " ; }"
    assert ebnf.main([write(tmp_path, text)], out=io.StringIO()) == 1
    assert "Invalid input grammar" in caplog.text
    assert "NestingTooDeep" in caplog.text

def test_no_short_tree_flag(tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        ebnf.main([write(tmp_path, grammar), "-t"], out=io.StringIO())
    assert excinfo.value.code == 2
