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

class BnfError(Exception):
    pass

class FileError(BnfError):
    """The grammar file is missing or cannot be read."""

    def __init__(self, filename, reason=""):
        self.filename = filename
        self.reason = reason
        if filename is None:
            msg = "missing file name"
        else:
            msg = "failed to open file %r" % (filename,)
        if reason:
            msg = "%s: %s" % (msg, reason)
        BnfError.__init__(self, msg)

class ParseError(BnfError):
    """Raised at the first syntax error; parsing does not resume.

    `token` is the offending token (None at the end of input) and
    `expected` describes what the grammar allowed at that point.
    """

    def __init__(self, token, expected):
        self.token = token
        self.expected = expected
        BnfError.__init__(self, self.describe())

    def describe(self):
        return "unexpected %r, expected %s" % (self.token, self.expected)

    @property
    def source_pos(self):
        if self.token is None:
            return None
        return self.token.source_pos

    def nice_error_message(self, filename="<stdin>", source=None):
        pos = self.source_pos
        if pos is None or source is None:
            return "  File %s\n%s: %s" % (filename, self.__class__.__name__, self.describe())
        lines = source.split("\n")
        line = lines[pos.lineno - 1]
        result = ["  File %s, line %s" % (filename, pos.lineno)]
        result.append("    " + line)
        result.append("    " + " " * pos.columnno + "^")
        result.append("%s: %s" % (self.__class__.__name__, self.describe()))
        return "\n".join(result)

class ExpressionNotRecognized(ParseError):
    pass

class UnexpectedToken(ParseError):
    """A specific token was required but another one was found."""

    def describe(self):
        return "unexpected %r, expected %r" % (self.token, self.expected)

class UnexpectedEOF(ParseError):

    def __init__(self, expected):
        ParseError.__init__(self, None, expected)

    def describe(self):
        return "unexpected end of input, expected %s" % (self.expected,)

class NestingTooDeep(ParseError):
    """Groups are nested deeper than the interpreter's recursion limit allows.

    `token` is the last token read before giving up.
    """

    def describe(self):
        return "groups nested too deeply at %r, expected %s" % (self.token, self.expected)
