# topmark:header:start
#
#   project      : Corpl
#   file         : strategies_corpl.py
#   file_relpath : tests/strategies_corpl.py
#   license      : MIT
#   copyright    : (c) 2025 The Corpl authors
#
# topmark:header:end

"""Hypothesis strategies for Corpl property tests.

Generated bodies never contain the comment marker, so a generated line can
never be mistaken for a directive and commenting it out is reversible.

This also keeps double-commented lines out of the idempotence property:
an enabled option strips one marker per run, so ``# # x=1`` becomes
``# x=1`` and then ``x=1``.
"""

from __future__ import annotations

from hypothesis import strategies as st

IDENTIFIERS: tuple[bytes, ...] = (b"alpha", b"beta", b"gamma", b"delta")

# Letters, spaces, tabs and '=' only: no '#', no line terminators
s_body: st.SearchStrategy[bytes] = st.binary(min_size=0, max_size=12).map(
    lambda raw: bytes(b"ab =\t"[byte % 5] for byte in raw)
)


@st.composite
def s_data_line(draw: st.DrawFn) -> bytes:
    """A data line, commented out or not."""
    body = draw(s_body)
    if draw(st.booleans()):
        return b"# " + body
    return body


@st.composite
def s_option_block(draw: st.DrawFn) -> list[bytes]:
    """An ``option`` region: directive, data lines, ``end``."""
    terms = draw(
        st.lists(
            st.tuples(st.booleans(), st.sampled_from(IDENTIFIERS)),
            min_size=1,
            max_size=3,
        )
    )
    expression = b" && ".join((b"!" if neg else b"") + ident for neg, ident in terms)
    lines = [b"# CORPL option " + expression]
    lines.extend(draw(st.lists(s_data_line(), max_size=4)))
    lines.append(b"# CORPL end")
    return lines


@st.composite
def s_option_file(draw: st.DrawFn) -> bytes:
    """A whole file made of free lines and option regions, uniform line endings."""
    line_ending = draw(st.sampled_from([b"\n", b"\r\n"]))
    lines = [b"# generated"]
    for _ in range(draw(st.integers(min_value=0, max_value=4))):
        if draw(st.booleans()):
            lines.extend(draw(s_option_block()))
        else:
            lines.append(draw(s_data_line()))
    return line_ending.join(lines) + line_ending


s_features: st.SearchStrategy[tuple[frozenset[bytes], frozenset[bytes], bool]] = st.tuples(
    st.frozensets(st.sampled_from(IDENTIFIERS)),
    st.frozensets(st.sampled_from(IDENTIFIERS)),
    st.booleans(),
)
