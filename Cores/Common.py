import os,json,logging,time
from logging.handlers import RotatingFileHandler
def _abs(*p):return os.path.join(os.path.dirname(os.path.abspath(__file__)),*p)
def project_root():return os.path.abspath(_abs(".."))
def logs_dir():
    d=os.environ.get("RXMARBLES_LOG_DIR") or os.path.join(project_root(),"Logs")
    os.makedirs(d,exist_ok=True);return d
def data_dir():
    d=os.environ.get("RXMARBLES_DATA_DIR") or os.path.join(project_root(),"Data")
    os.makedirs(d,exist_ok=True);return d
def log_setup(name):
    lg=logging.getLogger(f"RxMarbles.{name}");lg.setLevel(logging.INFO)
    fp=os.path.abspath(os.path.join(logs_dir(),f"{name}_log.log"))
    for h in list(lg.handlers):
        if os.path.abspath(getattr(h,"baseFilename","") or "")==fp:return lg
    h=RotatingFileHandler(fp,maxBytes=1024*1024,backupCount=5,encoding="utf-8")
    h.setFormatter(logging.Formatter("%(asctime)s %(message)s","%Y-%m-%d %H:%M:%S"))
    lg.addHandler(h);return lg
def make_log(name):
    """Return a ``log(tag,msg)`` writer bound to ``Logs/<name>_log.log``.

    The handler is attached lazily on first use. Tags in use: ``[+]`` ok,
    ``[-]`` soft failure, ``[*]`` info, ``[!]`` error.
    """
    box={"lg":None}
    def _log(tag,msg):
        try:
            if box["lg"] is None:box["lg"]=log_setup(name)
            box["lg"].info(f"{tag} {msg}")
        except Exception:
            pass
    return _log
def purge_old_logs(days=30):
    try:
        d=logs_dir()
        cut=time.time()-(days*86400);n=0
        for name in os.listdir(d):
            p=os.path.join(d,name)
            if not os.path.isfile(p):continue
            try:
                if os.path.getmtime(p)<cut:os.remove(p);n+=1
            except OSError:
                pass
        return n
    except OSError:
        return 0
def read_json(p,default):
    try:
        if not p or not os.path.isfile(p):return default
        with open(p,"r",encoding="utf-8") as f:
            v=json.load(f)
            return v if v is not None else default
    except (OSError,ValueError):
        return default
def write_json(p,obj):
    t=p+".tmp"
    try:
        os.makedirs(os.path.dirname(p),exist_ok=True)
        with open(t,"w",encoding="utf-8") as f:json.dump(obj,f,ensure_ascii=False,indent=2)
        os.replace(t,p);return True
    except (OSError,TypeError,ValueError):
        try:
            if os.path.isfile(t):os.remove(t)
        except OSError:
            pass
        return False
