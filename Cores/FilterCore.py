from Cores.Taxonomy import Section
def _l(s):return ("" if s is None else str(s)).lower()
def filter_sections(sections,text):
    """Keep the operators whose display name contains ``text``, ignoring case.

    Category order and row order are kept as-is and categories left without
    rows are dropped. Empty text matches everything; callers should show the
    unfiltered taxonomy instead (see ``is_search_active``).
    """
    q=_l(text)
    out=[]
    for s in sections:
        rows=tuple(op for op in s.rows if q in _l(op.description))
        if rows:out.append(Section(s.name,rows))
    return tuple(out)
def is_search_active(session_active,text):
    return bool(session_active) and (text or "")!=""
