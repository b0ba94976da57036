import os
from Cores.Common import data_dir,read_json,write_json,make_log,_abs
_log=make_log("Settings")
DEFAULTS={"log_keep_days":30,"window_w":980,"window_h":620,"theme":"DarkTheme.qss","splitter":[320,660]}
MIN_W=640
MIN_H=420
def _settings_path():return os.path.join(data_dir(),"settings.json")
def _read_settings():
    d=read_json(_settings_path(),{})
    return d if isinstance(d,dict) else {}
def _write_settings(data):return write_json(_settings_path(),data or {})
def _to_int(v,default):
    try:return int(v)
    except (TypeError,ValueError):return default
def get_app_settings():
    d=_read_settings()
    a=d.get("app",{}) if isinstance(d.get("app",{}),dict) else {}
    sp=a.get("splitter",DEFAULTS["splitter"])
    if not (isinstance(sp,list) and len(sp)==2):sp=DEFAULTS["splitter"]
    theme=str(a.get("theme") or DEFAULTS["theme"]).strip()
    return {
        "log_keep_days":max(1,_to_int(a.get("log_keep_days"),DEFAULTS["log_keep_days"])),
        "window_w":max(MIN_W,_to_int(a.get("window_w"),DEFAULTS["window_w"])),
        "window_h":max(MIN_H,_to_int(a.get("window_h"),DEFAULTS["window_h"])),
        "theme":os.path.basename(theme) or DEFAULTS["theme"],
        "splitter":[max(0,_to_int(x,0)) for x in sp],
    }
def save_app_settings(cfg):
    d=_read_settings()
    cur=d.get("app",{}) if isinstance(d.get("app",{}),dict) else {}
    cur.update(cfg or {})
    d["app"]=cur
    ok=_write_settings(d)
    _log("[+]" if ok else "[-]",f"Settings saved: {_settings_path()}" if ok else f"Settings not saved: {_settings_path()}")
    return ok
def theme_path(cfg=None):
    cfg=cfg or get_app_settings()
    return _abs("Theme",cfg["theme"])
