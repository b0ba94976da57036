from Cores.Common import make_log
from Cores import Taxonomy
from Cores.FilterCore import filter_sections,is_search_active
from Cores.Selection import SelectionState
_log=make_log("OperatorsCore")
class OperatorsController:
    """What the operators list asks for: sections, rows, the selection.

    While a search is active every lookup goes to the filtered sections,
    otherwise to the full taxonomy. Nothing here redraws; views subscribe to
    ``selection`` and re-render after calling ``on_query_changed``.
    """
    def __init__(self,sections=None,selection=None):
        self._sections=sections if sections is not None else Taxonomy.categories()
        self._filtered=()
        self._text=""
        self._session=False
        self.selection=selection if selection is not None else SelectionState()
    @property
    def query(self):return self._text
    def search_active(self):return is_search_active(self._session,self._text)
    def active_sections(self):return self._filtered if self.search_active() else self._sections
    def section_count(self):return Taxonomy.count(self.active_sections())
    def section_title(self,section):return Taxonomy.section_at(self.active_sections(),section).name
    def row_count(self,section):return len(Taxonomy.section_at(self.active_sections(),section).rows)
    def operator_at(self,section,row):return Taxonomy.item_at(self.active_sections(),section,row)
    def on_query_changed(self,text):
        self._text=text or ""
        self._session=True
        self._filtered=filter_sections(self._sections,self._text) if self._text else ()
        n=sum(len(s.rows) for s in self._filtered)
        _log("[*]",f"Query {self._text!r}: {len(self._filtered)} sections, {n} rows")
    def set_search_active(self,flag):
        self._session=bool(flag)
        if not self._session:
            self._text="";self._filtered=()
    def on_row_selected(self,section,row):
        op=self.operator_at(section,row)
        self.selection.select(op)
        return op
    def preview_row(self,section,row):
        op=self.on_row_selected(section,row)
        _log("[*]",f"Preview: {op}")
        return op
    def is_row_selected(self,section,row):
        return self.operator_at(section,row)==self.selection.current()
    def find(self,op):
        for i,s in enumerate(self.active_sections()):
            if op in s.rows:return i,s.rows.index(op)
        return None
