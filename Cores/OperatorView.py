from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QWidget,QVBoxLayout,QFrame,QLabel
from Cores.Common import make_log
from Cores.Taxonomy import category_of
_log=make_log("OperatorView")
class Widget(QWidget):
    def __init__(self,op=None,parent=None):
        super().__init__(parent)
        self.setObjectName("Page")
        self._op=None
        root=QVBoxLayout(self);root.setContentsMargins(0,0,0,0);root.setSpacing(0)
        self.wrap=QFrame(self);self.wrap.setObjectName("DetailFrame");root.addWidget(self.wrap,1)
        v=QVBoxLayout(self.wrap);v.setContentsMargins(22,22,22,22);v.setSpacing(10)
        self.title=QLabel("",self.wrap);self.title.setObjectName("PageTitle")
        self.sub=QLabel("",self.wrap);self.sub.setObjectName("PageSubTitle")
        self.diagram=QLabel("Marble diagram",self.wrap);self.diagram.setObjectName("DiagramArea")
        self.diagram.setAlignment(Qt.AlignmentFlag.AlignCenter);self.diagram.setMinimumHeight(220)
        v.addWidget(self.title);v.addWidget(self.sub);v.addWidget(self.diagram,1)
        if op is not None:self.set_operator(op)
    def operator(self):return self._op
    def set_operator(self,op):
        self._op=op
        self.title.setText(op.description)
        self.sub.setText(f"{category_of(op)} operator")
        _log("[*]",f"Detail: {op}")
