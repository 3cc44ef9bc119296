"""
Help formatter: render a parser's declarations into a fixed-width help document.

Layout (W = width)
- header (only when a program name is set):
    separator
    program left-justified in 75% of W, version right-justified in the remaining 25%
    separator
- description (only when set): wrapped to W, then a separator.
- an empty line.
- one entry per option, in registration order:
    alias column (30% of W): "*" marks mandatory options, aliases joined by ", ",
    " {args...}" when the option takes sub-arguments; the description fills the
    remaining 70% and wraps under the description column.
    options with sub-arguments list them under "Arguments:" as "{id} => descr".

Everything here is a pure function of its inputs: rendering the same parser twice
yields the same string.
"""

DEFAULT_WIDTH = 80


def separator(width=DEFAULT_WIDTH):
    """A full-width rule of dashes."""
    return "-" * width


def wrap(value, width=DEFAULT_WIDTH, pad=""):
    """
    Word-wrap `value` to `width` columns.

    While the remainder is longer than `width`, its first `width` characters are
    examined: the line breaks at their last space (the space is dropped) or, for an
    unbreakable run, hard-breaks at `width`. Lines after the first are prefixed with
    `pad`. The last line carries no trailing newline.
    """
    if not isinstance(width, int) or width < 1:
        raise ValueError("wrap() width must be a positive integer")

    lines = []
    prefix = ""
    while len(value) > width:
        block = value[:width]
        index = block.rfind(" ")
        if index != -1:
            lines.append(prefix + block[:index])
            value = value[index + 1:]
        else:
            lines.append(prefix + block)
            value = value[width:]
        prefix = pad
    lines.append(prefix + value)
    return "\n".join(lines)


def render(parser):
    """Compose the help document for `parser` (program, version, descr, width, options)."""
    width = parser.width
    column = width * 30 // 100
    space = width * 70 // 100
    padding = " " * column

    chunks = []

    if parser.program:
        chunks.append(separator(width) + "\n")
        chunks.append(parser.program.ljust(width * 75 // 100))
        chunks.append(parser.version.rjust(width * 25 // 100))
        chunks.append("\n" + separator(width) + "\n")

    if parser.descr:
        chunks.append(wrap(parser.descr, width) + "\n" + separator(width) + "\n")

    chunks.append("\n")

    for option in parser.options:
        names = ("*" if option.mandatory else "") + ", ".join(option.aliases)
        if option.arguments:
            names += " {args...}"

        chunks.append(names.ljust(column))
        chunks.append(wrap(option.descr, space, padding) + "\n")

        if option.arguments:
            chunks.append(padding + "Arguments:\n")
            for argument in option.arguments:
                chunks.append(padding + "{%s} => " % argument.id)
                chunks.append(wrap(argument.descr, space, padding) + "\n")

    return "".join(chunks)


__all__ = (
    "DEFAULT_WIDTH",
    "separator",
    "wrap",
    "render",
)
