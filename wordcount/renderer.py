"""
renderer.py - HTML Word Count Table

Collapses the sorted word list into (word, count) rows and writes them
as an HTML table framed by a fixed header and footer.

Words are written into the markup exactly as read: no escaping is
applied, so a word such as "<b>" becomes live markup in the output.
"""


def count_runs(words):
    """
    Yield (word, count) for each run of equal adjacent words.

    Runtime Complexity: O(n) where n is the number of words.
    Grouping is by adjacency only, so words must already be sorted.

    Args:
        words: Sorted sequence of words

    Yields:
        (word, count) tuples with count >= 1, in input order
    """
    current = None
    count = 0
    for word in words:
        if count and word == current:
            count += 1
            continue
        if count:
            yield current, count
        current = word
        count = 1
    if count:
        yield current, count


def output_header(out, loc):
    """Write the opening tags, naming the input location in title and heading."""
    out.write("<html>\n")
    out.write("<head>\n")
    out.write(f"<title>Words Counted in {loc}</title>\n")
    out.write("</head>\n")
    out.write("<body>\n")
    out.write(f"<h2>Words Counted in {loc}</h2>\n")
    out.write("<hr />\n")
    out.write("<table border=\"1\">\n")
    out.write("<tr>\n")
    out.write("<th>Words</th>\n")
    out.write("<th>Counts</th>\n")
    out.write("</tr>\n")


def output_rows(words, out):
    """
    Write one table row per distinct word.

    Args:
        words: Sorted sequence of words
        out: Writable text sink

    Returns:
        Number of rows written
    """
    rows = 0
    for word, count in count_runs(words):
        out.write("<tr>\n")
        out.write(f"<td>{word}</td>\n")
        out.write(f"<td>{count}</td>\n")
        out.write("</tr>\n")
        rows += 1
    return rows


def output_footer(out):
    out.write("</table>\n")
    out.write("</body>\n")
    out.write("</html>\n")


def render(words, out, loc):
    """
    Write the complete document: header, rows, footer.

    Args:
        words: Sorted sequence of words
        out: Writable text sink
        loc: Input location shown in the title and heading

    Returns:
        Number of rows written
    """
    output_header(out, loc)
    rows = output_rows(words, out)
    output_footer(out)
    return rows
