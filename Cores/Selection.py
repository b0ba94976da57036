from Cores.Common import make_log
from Cores.Operators import Operator,DEFAULT_OPERATOR
_log=make_log("Selection")
class SelectionState:
    """Currently selected operator plus the views that redraw on change."""
    def __init__(self,initial=DEFAULT_OPERATOR):
        if not isinstance(initial,Operator):raise TypeError(f"not an operator: {initial!r}")
        self._op=initial
        self._observers=[]
    def current(self):return self._op
    def subscribe(self,fn):
        if fn not in self._observers:self._observers.append(fn)
        return fn
    def unsubscribe(self,fn):
        if fn in self._observers:self._observers.remove(fn)
    def select(self,op):
        if not isinstance(op,Operator):raise TypeError(f"not an operator: {op!r}")
        self._op=op
        _log("[*]",f"Selected: {op}")
        for fn in list(self._observers):fn(op)
