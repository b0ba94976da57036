from typing import NamedTuple
from Cores.Common import make_log
from Cores.Operators import Operator as Op
_log=make_log("Taxonomy")
class TaxonomyError(ValueError):
    pass
class Section(NamedTuple):
    name:str
    rows:tuple
def validate(sections):
    """Every operator must sit in exactly one named category."""
    seen={}
    for s in sections:
        if not str(s.name or "").strip():raise TaxonomyError("category with empty name")
        for op in s.rows:
            if not isinstance(op,Op):raise TaxonomyError(f"{s.name}: not an operator: {op!r}")
            if op in seen:raise TaxonomyError(f"{op} listed in {seen[op]} and {s.name}")
            seen[op]=s.name
    missing=[str(op) for op in Op if op not in seen]
    if missing:raise TaxonomyError(f"operators without category: {', '.join(missing)}")
    return sections
_SECTIONS=validate((
    Section("Combining",(Op.COMBINE_LATEST,Op.CONCAT,Op.MERGE,Op.START_WITH,Op.SWITCH_LATEST,Op.WITH_LATEST_FROM,Op.ZIP)),
    Section("Conditional",(Op.AMB,Op.SKIP_UNTIL,Op.SKIP_WHILE,Op.SKIP_WHILE_WITH_INDEX,Op.TAKE_UNTIL,Op.TAKE_WHILE,Op.TAKE_WHILE_WITH_INDEX)),
    Section("Creating",(Op.EMPTY,Op.INTERVAL,Op.JUST,Op.NEVER,Op.OF,Op.REPEAT_ELEMENT,Op.THROW,Op.TIMER)),
    Section("Error",(Op.CATCH_ERROR,Op.CATCH_ERROR_JUST_RETURN,Op.RETRY)),
    Section("Filtering",(Op.DEBOUNCE,Op.DISTINCT_UNTIL_CHANGED,Op.ELEMENT_AT,Op.FILTER,Op.IGNORE_ELEMENTS,Op.SAMPLE,Op.SINGLE,Op.SKIP,Op.SKIP_DURATION,Op.TAKE,Op.TAKE_DURATION,Op.TAKE_LAST,Op.THROTTLE)),
    Section("Mathematical",(Op.REDUCE,)),
    Section("Transforming",(Op.BUFFER,Op.DELAY_SUBSCRIPTION,Op.FLAT_MAP,Op.FLAT_MAP_FIRST,Op.FLAT_MAP_LATEST,Op.MAP,Op.MAP_WITH_INDEX,Op.SCAN,Op.TO_ARRAY)),
    Section("Utility",(Op.TIMEOUT,)),
))
_CATEGORY_OF={op:s.name for s in _SECTIONS for op in s.rows}
def categories():return _SECTIONS
def count(sections):return len(sections)
def _check(i,n,what):
    # negative indices would silently wrap on a tuple
    if not isinstance(i,int) or i<0 or i>=n:
        _log("[!]",f"{what} index out of range: {i!r} (size {n})")
        raise IndexError(f"{what} index {i!r} out of range 0..{n-1}")
def section_at(sections,section):
    _check(section,len(sections),"section")
    return sections[section]
def item_at(sections,section,row):
    s=section_at(sections,section)
    _check(row,len(s.rows),"row")
    return s.rows[row]
def category_of(op):return _CATEGORY_OF[op]
