"""
Dart Formatter - Canonicalize emitted Dart source.

The formatter is a text-to-text service: formatting its own output returns
it unchanged. Source that cannot be laid out (unbalanced brackets,
unterminated strings, malformed declarations) raises FormattingFailure;
for emitter output that indicates a defect in the document model.
"""

import re
from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from ..core.errors import FormattingFailure
from ..utils.naming import is_identifier
from ..utils.logger import get_logger

logger = get_logger(__name__)


INDENT = '  '

OPENERS = {'(': ')', '[': ']', '{': '}'}
CLOSERS = {v: k for k, v in OPENERS.items()}

CLASS_RE = re.compile(r'^(?:abstract\s+)?class\s+(?P<name>[^\s{]+)(?:\s+extends\s+(?P<super>[^{]+?))?\s*\{$')
EXTENSION_RE = re.compile(r'^extension\s+(?P<name>[^\s{]+)\s+on\s+(?P<target>[^{]+?)\s*\{$')
IMPORT_RE = re.compile(r"^import\s+'[^']+';$")


class BaseFormatter(ABC):
    """Interface of the canonical source formatter."""

    @abstractmethod
    def format(self, source: str) -> str:
        """
        Canonicalize source text.

        Raises:
            FormattingFailure: If the source cannot be formatted
        """
        pass


class DartFormatter(BaseFormatter):
    """
    Bracket-depth formatter for the Dart subset the emitter produces.

    - Indents two spaces per line that opened an unclosed bracket
    - Strips trailing whitespace and collapses runs of blank lines
    - Drops blank lines directly inside brackets
    - Ends the file with exactly one newline
    """

    def format(self, source: str) -> str:
        lines = self._indent(source.splitlines())
        return self._join(lines)

    def _indent(self, raw_lines: List[str]) -> List[str]:
        # Each stack entry is (bracket, index of the line that opened it)
        stack: List[Tuple[str, int]] = []
        result: List[str] = []

        for number, raw in enumerate(raw_lines, start=1):
            line = raw.strip()
            if not line:
                result.append('')
                continue

            self._check_declaration(line, number)
            brackets = self._scan_brackets(line, number)

            leading = 0
            while leading < len(line) and line[leading] in CLOSERS:
                leading += 1
            for bracket in brackets[:leading]:
                self._close(stack, bracket, number)

            depth = len({opened_on for _, opened_on in stack})
            result.append(INDENT * depth + line)

            for bracket in brackets[leading:]:
                if bracket in OPENERS:
                    stack.append((bracket, number))
                else:
                    self._close(stack, bracket, number)

        if stack:
            bracket, opened_on = stack[-1]
            raise FormattingFailure(f"Unclosed '{bracket}'", line=opened_on)

        return result

    def _join(self, lines: List[str]) -> str:
        output: List[str] = []
        for line in lines:
            if not line:
                if not output or not output[-1] or output[-1][-1] in OPENERS:
                    continue
                output.append(line)
                continue
            if output and not output[-1] and line.lstrip()[0] in CLOSERS:
                output.pop()
            output.append(line)

        while output and not output[-1]:
            output.pop()

        return '\n'.join(output) + '\n'

    def _close(self, stack: List[Tuple[str, int]], bracket: str, number: int) -> None:
        if not stack:
            raise FormattingFailure(f"Unexpected '{bracket}'", line=number)
        opener, _ = stack.pop()
        if OPENERS[opener] != bracket:
            raise FormattingFailure(
                f"Mismatched '{bracket}', expected '{OPENERS[opener]}'", line=number
            )

    def _scan_brackets(self, line: str, number: int) -> List[str]:
        """Return the brackets on a line, ignoring strings and comments."""
        brackets = []
        quote: Optional[str] = None
        i = 0
        while i < len(line):
            char = line[i]
            if quote:
                if char == '\\':
                    i += 1
                elif char == quote:
                    quote = None
            elif char in ('"', "'"):
                quote = char
            elif line.startswith('//', i):
                break
            elif char in OPENERS or char in CLOSERS:
                brackets.append(char)
            i += 1

        if quote:
            raise FormattingFailure("Unterminated string literal", line=number)
        return brackets

    def _check_declaration(self, line: str, number: int) -> None:
        if line.startswith(('class ', 'abstract class ')):
            match = CLASS_RE.match(line)
            if not match or not is_identifier(match.group('name')):
                raise FormattingFailure(f"Malformed class declaration: {line}", line=number)
            super_type = match.group('super')
            if super_type and not is_identifier(super_type.split('<', 1)[0]):
                raise FormattingFailure(f"Invalid supertype: {super_type}", line=number)
        elif line.startswith('extension '):
            match = EXTENSION_RE.match(line)
            if not match or not is_identifier(match.group('name')):
                raise FormattingFailure(f"Malformed extension declaration: {line}", line=number)
        elif line.startswith('import '):
            if not IMPORT_RE.match(line):
                raise FormattingFailure(f"Malformed import directive: {line}", line=number)
