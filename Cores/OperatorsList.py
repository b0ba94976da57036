from PyQt6.QtCore import Qt,QPoint,pyqtSignal
from PyQt6.QtGui import QAction,QKeySequence,QShortcut
from PyQt6.QtWidgets import QWidget,QVBoxLayout,QHBoxLayout,QFrame,QLabel,QLineEdit,QToolButton,QTreeWidget,QTreeWidgetItem,QAbstractItemView,QHeaderView,QMenu,QMessageBox
from Cores.Common import make_log
from Cores.OperatorsCore import OperatorsController
_log=make_log("OperatorsList")
HELP_TEXT=(
    "Pick an operator to see how it transforms its input streams.\n\n"
    "Type in the search box to narrow the list; matching is on the operator "
    "name and ignores case. Esc clears the search, Ctrl+F jumps back to it.\n\n"
    "Right-click an operator to preview it."
)
_ROLE=Qt.ItemDataRole.UserRole
_C_NAME=0
_C_MARK=1
class Widget(QWidget):
    operator_opened=pyqtSignal(object)
    operator_previewed=pyqtSignal(object)
    def __init__(self,controller=None,parent=None):
        super().__init__(parent)
        self.setObjectName("Page")
        self.ctl=controller or OperatorsController()
        root=QVBoxLayout(self);root.setContentsMargins(0,0,0,0);root.setSpacing(0)
        self.wrap=QFrame(self);self.wrap.setObjectName("OpsFrame");root.addWidget(self.wrap,1)
        v=QVBoxLayout(self.wrap);v.setContentsMargins(10,10,10,10);v.setSpacing(10)
        top=QHBoxLayout();top.setSpacing(8)
        self.title=QLabel("Operators",self.wrap);self.title.setObjectName("PageTitle")
        self.help_btn=QToolButton(self.wrap);self.help_btn.setObjectName("OpsHelp");self.help_btn.setText("Help")
        self.help_btn.setCursor(Qt.CursorShape.PointingHandCursor);self.help_btn.clicked.connect(self.open_help)
        top.addWidget(self.title,1);top.addWidget(self.help_btn,0)
        v.addLayout(top)
        self.search=QLineEdit(self.wrap);self.search.setObjectName("OpsSearch")
        self.search.setPlaceholderText("Search");self.search.setClearButtonEnabled(True)
        self.search.textChanged.connect(self._on_text)
        v.addWidget(self.search)
        self.tree=QTreeWidget(self.wrap);self.tree.setObjectName("OpsTree")
        self.tree.setColumnCount(2);self.tree.setHeaderHidden(True)
        self.tree.setRootIsDecorated(False);self.tree.setIndentation(12)
        self.tree.setEditTriggers(QAbstractItemView.EditTrigger.NoEditTriggers)
        self.tree.setSelectionMode(QAbstractItemView.SelectionMode.SingleSelection)
        self.tree.setUniformRowHeights(True)
        h=self.tree.header();h.setStretchLastSection(False)
        h.setSectionResizeMode(_C_NAME,QHeaderView.ResizeMode.Stretch)
        h.setSectionResizeMode(_C_MARK,QHeaderView.ResizeMode.Fixed)
        self.tree.setColumnWidth(_C_MARK,28)
        self.tree.itemClicked.connect(self._click)
        self.tree.setContextMenuPolicy(Qt.ContextMenuPolicy.CustomContextMenu)
        self.tree.customContextMenuRequested.connect(self._ctx)
        v.addWidget(self.tree,1)
        self._esc=QShortcut(QKeySequence("Escape"),self.search);self._esc.activated.connect(self.cancel_search)
        self._find=QShortcut(QKeySequence("Ctrl+F"),self);self._find.activated.connect(self.focus_search)
        self.ctl.selection.subscribe(self._on_selection)
        self._render()
        _log("[+]",f"Operators list ready sections={self.ctl.section_count()}")
    def reload(self):self._render()
    def focus_search(self):
        self.search.setFocus(Qt.FocusReason.ShortcutFocusReason);self.search.selectAll()
    def cancel_search(self):
        self.search.blockSignals(True)
        try:self.search.clear()
        finally:self.search.blockSignals(False)
        self.ctl.set_search_active(False)
        self._render()
    def open_help(self):
        _log("[*]","Help opened")
        QMessageBox.information(self,"Help",HELP_TEXT)
    def _on_text(self,text):
        self.ctl.on_query_changed(text)
        self._render()
    def _on_selection(self,op):self._refresh_marks()
    def _pos(self,it):
        d=it.data(_C_NAME,_ROLE) if it else None
        return d if isinstance(d,tuple) else None
    def _click(self,it,col):
        p=self._pos(it)
        if p is None:return
        op=self.ctl.on_row_selected(*p)
        _log("[*]",f"Open: {op}")
        self.operator_opened.emit(op)
    def _ctx(self,pos:QPoint):
        p=self._pos(self.tree.itemAt(pos))
        if p is None:return
        m=QMenu(self)
        a1=QAction("Preview",self);a1.triggered.connect(lambda:self._preview(p))
        a2=QAction("Open",self);a2.triggered.connect(lambda:self.operator_opened.emit(self.ctl.on_row_selected(*p)))
        m.addAction(a1);m.addAction(a2)
        m.exec(self.tree.viewport().mapToGlobal(pos))
    def _preview(self,p):
        self.operator_previewed.emit(self.ctl.preview_row(*p))
    def _refresh_marks(self):
        for s in range(self.tree.topLevelItemCount()):
            sec=self.tree.topLevelItem(s)
            for r in range(sec.childCount()):
                it=sec.child(r);p=self._pos(it)
                if p is not None:it.setText(_C_MARK,"✓" if self.ctl.is_row_selected(*p) else "")
    def _render(self):
        self.tree.setUpdatesEnabled(False)
        try:
            self.tree.clear()
            for s in range(self.ctl.section_count()):
                sec=QTreeWidgetItem([self.ctl.section_title(s),""])
                sec.setFlags(Qt.ItemFlag.ItemIsEnabled)
                f=sec.font(_C_NAME);f.setBold(True);sec.setFont(_C_NAME,f)
                for r in range(self.ctl.row_count(s)):
                    op=self.ctl.operator_at(s,r)
                    it=QTreeWidgetItem([op.description,"✓" if self.ctl.is_row_selected(s,r) else ""])
                    it.setFlags(Qt.ItemFlag.ItemIsEnabled|Qt.ItemFlag.ItemIsSelectable)
                    it.setData(_C_NAME,_ROLE,(s,r));it.setToolTip(_C_NAME,op.description)
                    sec.addChild(it)
                self.tree.addTopLevelItem(sec)
            self.tree.expandAll()
        finally:
            self.tree.setUpdatesEnabled(True)
