#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import argparse
import logging
import re
import sys
import uuid

__version__ = '0.1.0'

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

#==============================================================================
# Globals
MAX_HEADING_LEVEL = 6
MIN_RULE_CHARS = 3
MIN_ALIGN_WIDTH = 3
CONTINUATION_INDENT = 2
FENCE = '```'

C_SPACE = ' '
C_TAB = '\t'
C_GREATERTHAN = '>'
C_PIPE = '|'
C_BACKSLASH = '\\'
C_COLON = ':'
C_DASH = '-'
C_HASH = '#'

RULE_CHARS = '*-_'
BULLET_CHARS = '-+*'
TASK_BULLET_CHARS = '-*'
TASK_BOX_CHARS = ' xX'
ORDERED_DELIMITERS = '.)'
DIGITS = '0123456789'

#==============================================================================
# Errors

class MarkdownLiteError(Exception):
    """Base class of the errors raised by mdlite"""
    pass

class ArgumentRequiredError(MarkdownLiteError, ValueError):
    """A required argument is missing"""
    pass

#==============================================================================
# Helpers

def is_blank(line):
    return line.strip() == ''

def split_lines(text):
    """Normalize `\\r\\n` and `\\r` to `\\n`, then split into lines"""
    return text.replace('\r\n', '\n').replace('\r', '\n').split('\n')

def escape_html(text):
    """Escape `&`, `<` and `>`.

    The ampersand goes first, otherwise the entities introduced for `<` and
    `>` would be escaped a second time. Quotes are left alone."""
    return text.replace('&', '&amp;').replace('<', '&lt;').replace('>', '&gt;')

def escape_attribute(text):
    """Make escaped text safe inside a double quoted attribute value"""
    return text.replace('"', '&quot;')

#==============================================================================
# Content, a cursor for the line scanners

class Content(object):
    """Utility Class for string content"""

    def __init__(self, string):
        self.string = string
        self.pos = 0

    def peek(self, offset=0):
        """peek the character `offset` after on the current string"""
        try:
            return self.string[self.pos + offset]
        except IndexError:
            return None

    def peek_in(self, chars, offset=0):
        """check if the character `offset` after is one of `chars`"""
        char = self.peek(offset)
        return char is not None and char in chars

    @property
    def rest(self):
        """Get the rest string content"""
        return self.string[self.pos:]

    def is_end(self):
        return self.pos >= len(self.string)

    def advance(self, num=1):
        self.pos += num

    def skip_chars(self, chars):
        """Skip a run of characters in `chars`, return the number skipped"""
        start_pos = self.pos
        while self.peek_in(chars):
            self.pos += 1
        return self.pos - start_pos

    def skip_spaces(self):
        """Skip a run of whitespace, return the number skipped"""
        start_pos = self.pos
        while not self.is_end() and self.string[self.pos].isspace():
            self.pos += 1
        return self.pos - start_pos

#==============================================================================
# Line scanners

def scan_heading(line):
    """`## text`, return (level, text) or None"""
    content = Content(line)
    level = content.skip_chars(C_HASH)
    if level < 1 or level > MAX_HEADING_LEVEL:
        return None
    if content.skip_spaces() == 0:
        return None

    text = content.rest.rstrip()
    if not text:
        return None
    return level, text

def is_thematic_break(line):
    """At least three `*`, `-` or `_` (the same one), optionally separated by
    spaces"""
    line = line.rstrip()
    if not line or line[0] not in RULE_CHARS:
        return False

    marker = line[0]
    count = 0
    for c in line:
        if c == marker:
            count += 1
        elif c != C_SPACE and c != C_TAB:
            return False
    return count >= MIN_RULE_CHARS

def scan_list_marker(line):
    """Scan the list marker at the beginning of a line.

    `-`, `+` and `*` start an unordered item, digits followed by `.` or `)`
    start an ordered one. The marker may be indented and must be followed by
    whitespace.

    :returns: (type, text) where type is 'ordered' or 'unordered' and text is
              what follows the marker, None if the line is not a list item

    """
    content = Content(line)
    content.skip_spaces()

    if content.peek_in(BULLET_CHARS):
        content.advance()
        list_type = 'unordered'
    elif content.skip_chars(DIGITS) > 0 and content.peek_in(ORDERED_DELIMITERS):
        content.advance()
        list_type = 'ordered'
    else:
        return None

    if content.skip_spaces() == 0:
        return None
    return list_type, content.rest

def scan_task_marker(line):
    """`- [ ] text` or `* [x] text`, return (checked, text) or None"""
    content = Content(line)
    content.skip_spaces()

    if not content.peek_in(TASK_BULLET_CHARS):
        return None
    content.advance()
    if content.skip_spaces() == 0:
        return None

    if content.peek() != '[' or not content.peek_in(TASK_BOX_CHARS, 1) or content.peek(2) != ']':
        return None
    checked = content.peek(1) != C_SPACE
    content.advance(3)

    if content.skip_spaces() == 0:
        return None
    return checked, content.rest

def is_continuation(line):
    """A line indented by two or more whitespace characters"""
    stripped = line.lstrip()
    return stripped != '' and len(line) - len(stripped) >= CONTINUATION_INDENT

def strip_quote_marker(line):
    """Remove `>` and at most one whitespace after it, None if not quoted"""
    if not line.startswith(C_GREATERTHAN):
        return None
    rest = line[1:]
    if rest[:1].isspace():
        rest = rest[1:]
    return rest

def scan_definition(line):
    """`term: definition`, return (term, definition) or None.

    The term runs up to the first colon, which must be followed by whitespace.
    """
    colon = line.find(C_COLON)
    if colon <= 0:
        return None

    term = line[:colon].strip()
    rest = line[colon+1:]
    if not term or not rest[:1].isspace():
        return None

    definition = rest.strip()
    if not definition:
        return None
    return term, definition

def starts_block(line):
    """Check if the line would open a block other than a paragraph"""
    return (scan_heading(line) is not None
            or is_thematic_break(line)
            or scan_list_marker(line) is not None
            or line.startswith(C_GREATERTHAN)
            or line.startswith(FENCE)
            or line.lstrip().startswith(C_PIPE))

#------------------------------------------------------------------------------
# Table rows

def split_row(row):
    """Split a table row into trimmed cells.

    Outer pipes are optional. A backslash keeps the next character literally,
    so `\\|` is a pipe inside a cell rather than a column break."""
    row = row.strip()
    if row.startswith(C_PIPE):
        row = row[1:]
    if row.endswith(C_PIPE):
        # an odd run of backslashes escapes the pipe, an even one escapes itself
        backslashes = len(row[:-1]) - len(row[:-1].rstrip(C_BACKSLASH))
        if backslashes % 2 == 0:
            row = row[:-1]

    cells = []
    current = []
    escaped = False
    for c in row:
        if escaped:
            current.append(c)
            escaped = False
        elif c == C_BACKSLASH:
            escaped = True
        elif c == C_PIPE:
            cells.append(''.join(current).strip())
            current = []
        else:
            current.append(c)
    cells.append(''.join(current).strip())
    return cells

def is_alignment_cell(cell):
    """Dashes with an optional colon at either end, three characters or more:
    `---`, `:--`, `--:`, `:-:`"""
    cell = cell.strip()
    content = Content(cell)
    if content.peek() == C_COLON:
        content.advance()
    if content.skip_chars(C_DASH) == 0:
        return False
    if content.peek() == C_COLON:
        content.advance()
    return content.is_end() and len(cell) >= MIN_ALIGN_WIDTH

def is_alignment_row(cells):
    return len(cells) > 0 and all(is_alignment_cell(cell) for cell in cells)

def parse_alignment(cell):
    """Column alignment from a separator cell: 'left', 'center', 'right' or None"""
    cell = cell.strip()
    left = cell.startswith(C_COLON)
    right = cell.endswith(C_COLON)
    if left and right:
        return 'center'
    elif right:
        return 'right'
    elif left:
        return 'left'
    return None

#==============================================================================
# Placeholders

class Placeholders(object):
    """Opaque tokens standing in for finished HTML fragments.

    A fragment is reserved as soon as it is rendered (code spans, links,
    images), so the later substitution passes never see its content. Each
    token carries a random salt and a counter; it contains only `§` and hex
    digits, none of which any inline rule reacts to."""

    def __init__(self):
        self.salt = uuid.uuid4().hex
        self.fragments = []

    def reserve(self, literal, plain=None):
        """Store `literal`, return the token that stands for it.

        `plain` is the escaped text the fragment reads as when it ends up in
        an attribute value, the literal itself if not given."""
        token = '§§%s%x§§' % (self.salt, len(self.fragments))
        self.fragments.append((token, literal, literal if plain is None else plain))
        return token

    def resolve(self, text):
        """Replace every token in `text` with its fragment.

        Later fragments may embed earlier tokens (an image inside a link), so
        tokens are replaced newest first."""
        for token, literal, _ in reversed(self.fragments):
            text = text.replace(token, literal)
        return text

    def resolve_plain(self, text):
        """Replace every token in `text` with its plain text, no markup"""
        for token, _, plain in reversed(self.fragments):
            text = text.replace(token, plain)
        return text

#==============================================================================
# Inline Renderer

class InlineRule(object):
    """Base Class for one substitution pass over escaped inline text.

    Rules run in ascending `precedence`. By default a match is replaced by its
    first group wrapped in `tag`."""

    precedence = 100
    pattern = None
    tag = None

    def apply(self, renderer, text):
        return self.pattern.sub(lambda match: self.replace(renderer, match), text)

    def replace(self, renderer, match):
        return '<%s>%s</%s>' % (self.tag, match.group(1), self.tag)

#------------------------------------------------------------------------------
# Rule: Code Span

class RuleCodeSpan(InlineRule):
    """`code`, the text is already escaped and goes in untouched"""

    precedence = 10
    pattern = re.compile(r'`([^`]*?)`')

    def replace(self, renderer, match):
        code = match.group(1)
        return renderer.placeholders.reserve('<code>' + code + '</code>', code)

#------------------------------------------------------------------------------
# Rule: Image and Link

# (url "title") or (url 'title'), `<` and `>` are already escaped at this point
LINK_TARGET = r'\(\s*([^)\s]+)\s*(?:"([^"]*)"|\'([^\']*)\')?\s*\)'

def attribute_value(renderer, text):
    """Attribute text with reserved fragments reduced to their plain text"""
    return escape_attribute(renderer.placeholders.resolve_plain(text))

def link_destination(renderer, url):
    """chop off <..> around the destination"""
    if url.startswith('&lt;') and url.endswith('&gt;') and len(url) > 8:
        url = url[4:-4]
    return attribute_value(renderer, url)

def title_attribute(renderer, title):
    return ' title="%s"' % attribute_value(renderer, title) if title else ''

class RuleImage(InlineRule):
    """![alt](src "title"), code spans in any part show up as their text"""

    precedence = 20
    pattern = re.compile(r'!\[([^\]]*?)\]' + LINK_TARGET)

    def replace(self, renderer, match):
        alt = renderer.placeholders.resolve_plain(match.group(1))
        html = '<img src="%s" alt="%s"%s>' % (
                link_destination(renderer, match.group(2)),
                escape_attribute(alt),
                title_attribute(renderer, match.group(3) or match.group(4)))
        return renderer.placeholders.reserve(html, alt)

class RuleLink(InlineRule):
    """[label](href "title"), the label is rendered as inline content itself"""

    precedence = 30
    pattern = re.compile(r'\[([^\]]+?)\]' + LINK_TARGET)

    def replace(self, renderer, match):
        label = InlineRenderer().render(match.group(1))
        html = '<a href="%s"%s>%s</a>' % (
                link_destination(renderer, match.group(2)),
                title_attribute(renderer, match.group(3) or match.group(4)),
                label)
        return renderer.placeholders.reserve(html, renderer.placeholders.resolve_plain(match.group(1)))

#------------------------------------------------------------------------------
# Rule: Auto Link

class RuleAutolink(InlineRule):
    """<https://...>, <http://...> and <mailto:...>"""

    precedence = 40
    pattern = re.compile(r'&lt;((?:https?://|mailto:)(?:(?!&gt;)\S)+)&gt;')

    def replace(self, renderer, match):
        url = match.group(1)
        html = '<a href="%s">%s</a>' % (escape_attribute(url), url)
        return renderer.placeholders.reserve(html, url)

#------------------------------------------------------------------------------
# Rule: Simple spans

class RuleStrikethrough(InlineRule):
    precedence = 50
    pattern = re.compile(r'~~([^~]+)~~')
    tag = 'del'

class RuleUnderline(InlineRule):
    precedence = 51
    pattern = re.compile(r'\+\+(.+?)\+\+')
    tag = 'u'

class RuleHighlight(InlineRule):
    precedence = 52
    pattern = re.compile(r'==(.+?)==')
    tag = 'mark'

class RuleSuperscript(InlineRule):
    precedence = 53
    pattern = re.compile(r'\^([^^]+)\^')
    tag = 'sup'

class RuleSubscript(InlineRule):
    """~text~, a tilde that belongs to a `~~` run is left alone"""

    precedence = 60
    pattern = re.compile(r'(^|[^~])~([^~]+)~(?!~)')

    def replace(self, renderer, match):
        return '%s<sub>%s</sub>' % (match.group(1), match.group(2))

#------------------------------------------------------------------------------
# Rule: Emphasis

class RuleStrongStar(InlineRule):
    precedence = 70
    pattern = re.compile(r'\*\*(.+?)\*\*', re.DOTALL)
    tag = 'strong'

class RuleStrongUnderscore(InlineRule):
    precedence = 71
    pattern = re.compile(r'__(.+?)__', re.DOTALL)
    tag = 'strong'

# the opener follows the start, whitespace or `(`, the closer is followed by
# the end, whitespace or punctuation; this keeps snake_case_names intact
EMPHASIS_OPEN = r'(^|[\s(])'
EMPHASIS_CLOSE = r'(?=[\s).,;:!?]|$)'

class RuleEmphasisStar(InlineRule):
    precedence = 80
    pattern = re.compile(EMPHASIS_OPEN + r'\*([^\s*]|\S.*?\S)\*' + EMPHASIS_CLOSE, re.DOTALL)

    def replace(self, renderer, match):
        return '%s<em>%s</em>' % (match.group(1), match.group(2))

class RuleEmphasisUnderscore(InlineRule):
    precedence = 81
    pattern = re.compile(EMPHASIS_OPEN + r'_([^\s_]|\S.*?\S)_' + EMPHASIS_CLOSE, re.DOTALL)

    def replace(self, renderer, match):
        return '%s<em>%s</em>' % (match.group(1), match.group(2))

#------------------------------------------------------------------------------
# Actual renderer that utilize all rules

class InlineRenderer(object):
    """Run all inline rules in order over one piece of escaped text"""

    rules = [r() for r in sorted(InlineRule.__subclasses__(), key=lambda r: r.precedence)]

    def __init__(self):
        self.placeholders = Placeholders()

    def render(self, text):
        for rule in self.rules:
            text = rule.apply(self, text)
        return self.placeholders.resolve(text)

def render_inline(text):
    """Escape `text` and render its inline markup to HTML"""
    if not text:
        return ''
    return InlineRenderer().render(escape_html(text))

#==============================================================================
# Blocks

class BlockMatch(object):
    """The HTML of a recognized block and the number of lines it took"""

    def __init__(self, html, lines_consumed):
        if lines_consumed < 1:
            raise ValueError('a block must consume at least one line, got %d' % lines_consumed)
        self.html = html
        self.lines_consumed = lines_consumed

    def __repr__(self):
        return 'BlockMatch(%r, %d)' % (self.html, self.lines_consumed)


class BlockParser(object):
    """Recognize a block starting at a line"""

    precedence = 100 # smaller number is tried first

    @staticmethod
    def parse(parser, lines, start):
        """Try the lines beginning at `start`, return a BlockMatch if they form
        the block, otherwise return None"""
        return None

#------------------------------------------------------------------------------

class HeadingParser(BlockParser):
    precedence = 10

    @staticmethod
    def parse(parser, lines, start):
        heading = scan_heading(lines[start])
        if heading is None:
            return None

        level, text = heading
        return BlockMatch('<h%d>%s</h%d>' % (level, render_inline(text), level), 1)

#------------------------------------------------------------------------------

class ThematicBreakParser(BlockParser):
    precedence = 20

    @staticmethod
    def parse(parser, lines, start):
        return BlockMatch('<hr>', 1) if is_thematic_break(lines[start]) else None

#------------------------------------------------------------------------------

class FencedCodeParser(BlockParser):
    """```, the info string is ignored and an unclosed fence runs to the end"""

    precedence = 30

    @staticmethod
    def parse(parser, lines, start):
        if not lines[start].startswith(FENCE):
            return None

        body = []
        i = start + 1
        while i < len(lines) and not lines[i].startswith(FENCE):
            body.append(lines[i])
            i += 1

        # skip the closing fence
        if i < len(lines):
            i += 1

        return BlockMatch('<pre><code>%s\n</code></pre>' % escape_html('\n'.join(body)), i - start)

#------------------------------------------------------------------------------

class BlockQuoteParser(BlockParser):
    """Strip `>` from a run of quoted lines and parse the rest as blocks"""

    precedence = 40

    @staticmethod
    def parse(parser, lines, start):
        quoted = []
        i = start
        while i < len(lines):
            line = strip_quote_marker(lines[i])
            if line is None:
                break
            quoted.append(line)
            i += 1

        if not quoted:
            return None

        parser.depth += 1
        logger.debug('line %d: parsing %d quoted lines at depth %d', start + 1, len(quoted), parser.depth)
        try:
            inner = parser.parse_lines(quoted)
        finally:
            parser.depth -= 1

        return BlockMatch('<blockquote>\n%s\n</blockquote>' % inner, i - start)

#------------------------------------------------------------------------------

def render_row(tag, cells, alignments):
    ret = []
    for idx, alignment in enumerate(alignments):
        style = ' style="text-align:%s;"' % alignment if alignment else ''
        cell = cells[idx] if idx < len(cells) else ''
        ret.append('<%s%s>%s</%s>' % (tag, style, render_inline(cell), tag))
    return '<tr>' + ''.join(ret) + '</tr>'

class TableParser(BlockParser):
    """A header row, an alignment row and the body rows below them"""

    precedence = 50

    @staticmethod
    def parse(parser, lines, start):
        if start + 1 >= len(lines):
            return None

        header_line = lines[start]
        separator_line = lines[start+1]
        if C_PIPE not in header_line or C_PIPE not in separator_line:
            return None

        header = split_row(header_line)
        separator = split_row(separator_line)
        if not is_alignment_row(separator):
            logger.debug('line %d: not a table, bad alignment row %r', start + 2, separator_line)
            return None

        rows = []
        i = start + 2
        while i < len(lines):
            line = lines[i]
            if is_blank(line) or C_PIPE not in line:
                break
            cells = split_row(line)
            # another alignment row starts a new table
            if is_alignment_row(cells):
                break
            rows.append(cells)
            i += 1

        columns = max([len(header), len(separator)] + [len(row) for row in rows])
        alignments = [parse_alignment(separator[idx]) if idx < len(separator) else None
                for idx in range(columns)]

        html = '<table><thead>%s</thead><tbody>%s</tbody></table>' % (
                render_row('th', header, alignments),
                ''.join(render_row('td', row, alignments) for row in rows))
        return BlockMatch(html, i - start)

#------------------------------------------------------------------------------

class DefinitionListParser(BlockParser):
    precedence = 60

    @staticmethod
    def parse(parser, lines, start):
        items = []
        i = start
        while i < len(lines):
            definition = scan_definition(lines[i])
            if definition is None:
                break
            items.append(definition)
            i += 1

        if not items:
            return None

        html = ''.join('<dt>%s</dt><dd>%s</dd>' % (render_inline(term), render_inline(definition))
                for term, definition in items)
        return BlockMatch('<dl>' + html + '</dl>', i - start)

#------------------------------------------------------------------------------

class ListItem(object):
    """A rendered `<li>` and the kind of marker that introduced it"""

    def __init__(self, html, type):
        self.html = html
        self.type = type

class ListParser(BlockParser):
    """A run of list items. Task items always count as unordered, and one
    ordered item turns the whole run into `<ol>`."""

    precedence = 70

    @staticmethod
    def parse(parser, lines, start):
        if scan_list_marker(lines[start]) is None:
            return None

        items = []
        i = start
        while i < len(lines):
            marker = scan_list_marker(lines[i])
            if marker is None:
                break

            task = scan_task_marker(lines[i])
            if task is not None:
                checked, text = task
                html = '<li class="task"><input type="checkbox" disabled%s> %s</li>' % (
                        ' checked' if checked else '', render_inline(text))
                items.append(ListItem(html, 'unordered'))
                i += 1
                continue

            list_type, text = marker
            content = [text]
            i += 1
            while i < len(lines) and is_continuation(lines[i]):
                content.append(lines[i][CONTINUATION_INDENT:])
                i += 1
            items.append(ListItem('<li>%s</li>' % render_inline('\n'.join(content)), list_type))

        tag = 'ol' if any(item.type == 'ordered' for item in items) else 'ul'
        html = '<%s>\n%s\n</%s>' % (tag, '\n'.join(item.html for item in items), tag)
        return BlockMatch(html, i - start)

#------------------------------------------------------------------------------

class ParagraphParser(BlockParser):
    """Lines up to a blank line or the start of another block"""

    precedence = 80

    @staticmethod
    def parse(parser, lines, start):
        content = []
        i = start
        while i < len(lines) and not is_blank(lines[i]) and not starts_block(lines[i]):
            content.append(lines[i])
            i += 1

        if not content:
            return None

        # single line breaks are kept as <br>
        html = render_inline('\n'.join(content)).replace('\n', '<br>\n')
        return BlockMatch('<p>%s</p>' % html, i - start)

class FallbackParagraphParser(BlockParser):
    """The current line on its own, matches anything"""

    precedence = 90

    @staticmethod
    def parse(parser, lines, start):
        logger.debug('line %d: no block matched, using a single line paragraph', start + 1)
        return BlockMatch('<p>%s</p>' % render_inline(lines[start]), 1)

#==============================================================================

class BlockFactory(object):
    """All block parsers, in the order they are tried"""

    block_parsers = sorted(BlockParser.__subclasses__(), key=lambda b: b.precedence)

    @staticmethod
    def matched_block(parser, lines, start):
        """iterate through all block parsers trying to parse the line at `start`.

        :returns: the first BlockMatch, None if no parser claims the line

        """
        for b in BlockFactory.block_parsers:
            ret = b.parse(parser, lines, start)
            if ret is not None:
                return ret
        return None

#==============================================================================
# Parser

class Parser(object):
    """Turn lines of Markdown into HTML blocks"""

    def __init__(self):
        super(Parser, self).__init__()
        self.depth = 0 # blockquote nesting

    def parse_lines(self, lines):
        """Dispatch each non blank line to the block parsers, return the HTML
        of the blocks joined by newlines"""
        ret = []
        i = 0
        while i < len(lines):
            if is_blank(lines[i]):
                i += 1
                continue

            block = BlockFactory.matched_block(self, lines, i)
            ret.append(block.html)
            i += block.lines_consumed
        return '\n'.join(ret)

    def parse(self, text):
        return self.parse_lines(split_lines(text))

#==============================================================================
# Public interface

def parse(markdown_text):
    """Convert Markdown to HTML. Never fails; anything that is not a string is
    converted with str() first and None counts as empty."""
    if markdown_text is None:
        markdown_text = ''
    elif not isinstance(markdown_text, str):
        markdown_text = str(markdown_text)
    return Parser().parse(markdown_text)

def render_to(markdown_text, target):
    """Set `target.inner_html` to the HTML of `markdown_text`, return `target`"""
    if target is None:
        raise ArgumentRequiredError('render_to requires a target element')
    target.inner_html = parse(markdown_text)
    return target

#==============================================================================

def main(argv=None):
    arg_parser = argparse.ArgumentParser(prog='mdlite',
            description='Convert Markdown to HTML')
    arg_parser.add_argument('files', nargs='*', metavar='FILE',
            help="Markdown files to convert, '-' or nothing reads stdin")
    arg_parser.add_argument('-v', '--verbose', action='store_true',
            help='log parsing decisions to stderr')
    arg_parser.add_argument('--version', action='version',
            version='%(prog)s ' + __version__)
    args = arg_parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG,
                format='%(levelname)s %(name)s: %(message)s')

    texts = []
    for name in args.files or ['-']:
        if name == '-':
            texts.append(sys.stdin.read())
            continue
        try:
            with open(name, encoding='utf-8') as fp:
                texts.append(fp.read())
        except OSError as e:
            arg_parser.error("can't open '%s': %s" % (name, e.strerror))

    print(parse('\n'.join(texts)))

if __name__ == '__main__':
    main()
