"""Utility for removing the common indentation of captured code lines."""


def _leading_whitespace(line: str) -> int:
    n = 0
    while n < len(line) and line[n].isspace():
        n += 1
    return n


def trim_each_line(lines: list[str]) -> str:
    """Strip the smallest indentation of the non-blank lines from each line.

    Blank lines become empty and every line ends with a single newline.
    """
    indents = [_leading_whitespace(line) for line in lines if line.strip()]
    strip = min(indents, default=0)
    out = []
    for line in lines:
        if line.strip():
            out.append(line[strip:] + "\n")
        else:
            out.append("\n")
    return "".join(out)
