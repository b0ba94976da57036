import sys
from PyQt6.QtCore import Qt,QTimer
from PyQt6.QtWidgets import QApplication,QMainWindow,QWidget,QHBoxLayout,QSplitter
from Cores.Common import make_log,purge_old_logs
from Cores import Settings
from Cores import OperatorsList,OperatorView
from Cores.OperatorsCore import OperatorsController
APP_NAME="RxMarbles"
APP_VER="1.0.0"
_log=make_log("RxMarbles")
def _load_qss(cfg):
    p=Settings.theme_path(cfg)
    try:
        with open(p,"r",encoding="utf-8") as f:
            s=f.read();_log("[+]",f"Theme loaded: {p}");return s
    except OSError as e:
        _log("[-]",f"Theme not loaded: {p} ({e})");return ""
class MainWindow(QMainWindow):
    def __init__(self,cfg=None,controller=None):
        super().__init__()
        self.cfg=cfg or Settings.get_app_settings()
        self.setObjectName("MainWindow")
        self.setWindowTitle(f"{APP_NAME} v{APP_VER}")
        self.setMinimumSize(Settings.MIN_W,Settings.MIN_H)
        self.resize(self.cfg["window_w"],self.cfg["window_h"])
        self.ctl=controller or OperatorsController()
        self.root=QWidget();self.root.setObjectName("Root");self.setCentralWidget(self.root)
        h=QHBoxLayout(self.root);h.setContentsMargins(14,14,14,14);h.setSpacing(12)
        self.splitter=QSplitter(Qt.Orientation.Horizontal,self.root);self.splitter.setChildrenCollapsible(False)
        self.page_list=OperatorsList.Widget(self.ctl)
        self.page_detail=OperatorView.Widget(self.ctl.selection.current())
        self.splitter.addWidget(self.page_list);self.splitter.addWidget(self.page_detail)
        self.splitter.setStretchFactor(1,1)
        if any(self.cfg["splitter"]):self.splitter.setSizes(self.cfg["splitter"])
        h.addWidget(self.splitter)
        self.page_list.operator_opened.connect(self.open_operator)
        self.page_list.operator_previewed.connect(self.open_operator)
        self._start_log_cleanup()
        _log("[+]","MainWindow ready")
    def open_operator(self,op):
        self.page_detail.set_operator(op)
        _log("[*]",f"Nav: {op}")
    def _start_log_cleanup(self):
        days=self.cfg["log_keep_days"]
        self._log_timer=QTimer(self);self._log_timer.setInterval(21600000);self._log_timer.timeout.connect(lambda:purge_old_logs(days));self._log_timer.start();purge_old_logs(days)
    def closeEvent(self,e):
        Settings.save_app_settings({"window_w":self.width(),"window_h":self.height(),"splitter":self.splitter.sizes()})
        super().closeEvent(e)
def main():
    _log("[*]",f"Start {APP_NAME} v{APP_VER}")
    cfg=Settings.get_app_settings()
    app=QApplication(sys.argv)
    app.setApplicationName(APP_NAME);app.setApplicationDisplayName(APP_NAME)
    qss=_load_qss(cfg)
    if qss:app.setStyleSheet(qss);_log("[+]","Theme applied")
    w=MainWindow(cfg);w.show();_log("[+]","Window shown")
    r=app.exec();_log("[*]",f"Exit code: {r}");sys.exit(r)
if __name__=="__main__":main()
