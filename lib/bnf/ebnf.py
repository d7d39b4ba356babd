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

import sys
import logging
from optparse import OptionParser

from bnf.grammar_parser.gparser import Parser, TraceOptions
from bnf.grammar_parser.errors import FileError, ParseError

def parse_options(args=None):
    parser = OptionParser(usage="usage: %prog FILE [options]")
    parser.add_option("--tree", action="store_true", default=False, help="Pretty printed BNF parse tree")
    (options, args) = parser.parse_args(args)
    if len(args) != 1:
        parser.error("expected exactly one input file")
    return options, args[0]

def main(args=None, out=None):
    logging.basicConfig(format='%(levelname)s: %(message)s', level=logging.WARNING)
    options, filename = parse_options(args)

    level = TraceOptions.BNF
    if options.tree:
        level = TraceOptions.BNFTREE

    try:
        parser = Parser.from_file(filename, level=level, out=out)
    except FileError as e:
        logging.error("%s", e)
        return 1
    try:
        parser.parse()
    except ParseError as e:
        logging.error("Invalid input grammar:\n%s", e.nice_error_message(filename, parser.code))
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
