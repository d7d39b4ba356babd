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

from bnf.grammar_parser.astree import ASTNode, Root, Grammar, TokenDef, Production, Lhs
from bnf.grammar_parser.astree import Terminal, Nonterminal, SemanticAction, Punctuation

def make_tree():
    root = ASTNode(Root())
    root.add_child(ASTNode(Grammar("g")))
    p = root.add_child(ASTNode(Production(1)))
    p.add_child(ASTNode(Lhs("S")))
    p.add_child(ASTNode(Terminal("a")))
    p.add_child(ASTNode(Punctuation("|")))
    p.add_child(ASTNode(Nonterminal("S")))
    return root

def test_descriptions():
    assert Root().description == "Root Node"
    assert Grammar("g").description == "Grammar: g"
    assert TokenDef("id", "[a-z]+").description == "Token: (id, [a-z]+)"
    assert Production(3).description == "Production[3]"
    assert Lhs("S").description == "lhs: S"
    assert Terminal("a").description == "Terminal: a"
    assert Nonterminal("S").description == "Nonterminal: S"
    assert SemanticAction("x()").description == "Semantic Action: x()"
    assert Punctuation("[").description == "Punctuation: ["

def test_node_equality():
    assert Terminal("a") == Terminal("a")
    assert Terminal("a") != Nonterminal("a")
    assert Production(1) != Production(2)
    assert Root() == Root()
    assert TokenDef("a", "b") != TokenDef("b", "a")

def test_kinds():
    assert [n.kind for n in [Root(), Grammar("g"), TokenDef("a", "b"), Production(1), Lhs("S"),
            Terminal("a"), Nonterminal("A"), SemanticAction(""), Punctuation("|")]] == \
        ["root", "grammar", "token", "production", "lhs", "terminal", "nonterminal",
         "semanticAction", "punctuation"]

def test_traverse_preorder():
    visited = []
    make_tree().traverse(lambda node: visited.append(str(node)))
    assert visited == ["Root Node", "Grammar: g", "Production[1]", "lhs: S",
                       "Terminal: a", "Punctuation: |", "Nonterminal: S"]

def test_traverse_indented():
    visited = []
    make_tree().traverse_indented(lambda node, indent: visited.append(indent + str(node)))
    assert visited == [
        "Root Node",
        "    Grammar: g",
        "    Production[1]",
        "        lhs: S",
        "        Terminal: a",
        "        Punctuation: |",
        "        Nonterminal: S",
    ]

def test_walk_matches_traverse():
    tree = make_tree()
    visited = []
    tree.traverse(visited.append)
    assert list(tree.walk()) == visited

def test_traverse_twice():
    tree = make_tree()
    first = []
    second = []
    tree.traverse_indented(lambda node, indent: first.append((indent, node.description)))
    tree.traverse_indented(lambda node, indent: second.append((indent, node.description)))
    assert first == second
    assert tree == make_tree()

def test_tree_lines():
    assert make_tree().tree_lines() == [
        "Root Node",
        "┣╸Grammar: g",
        "┗╸Production[1]",
        "  ┣╸lhs: S",
        "  ┣╸Terminal: a",
        "  ┣╸Punctuation: |",
        "  ┗╸Nonterminal: S",
    ]

def test_tree_lines_nested_non_last():
    root = ASTNode(Root())
    p = root.add_child(ASTNode(Production(1)))
    p.add_child(ASTNode(Lhs("A")))
    root.add_child(ASTNode(Production(2)))
    assert root.tree_string() == "Root Node\n┣╸Production[1]\n┃ ┗╸lhs: A\n┗╸Production[2]"

def test_single_node():
    assert ASTNode(Root()).tree_lines() == ["Root Node"]
