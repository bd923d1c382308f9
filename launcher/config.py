# launcher/config.py
import os
import json

# =========================
# 默认配置
# =========================
CONFIG_FILENAME = "launcher.json"
PACKAGE_FILENAME = "package.json"
DEFAULT_ICON_PATH = "app/assets/icons/logo.png"

DEFAULT_CONFIG = {
    "ios": {
        "icon": DEFAULT_ICON_PATH
    },
    "android": {
        "icon": DEFAULT_ICON_PATH
    }
}

# Fixed React Native project layout, relative to the project root
ANDROID_RES_DIR = os.path.join("android", "app", "src", "main", "res")
ANDROID_MANIFEST = os.path.join("android", "app", "src", "main", "AndroidManifest.xml")
IOS_ICON_DIR = os.path.join("ios", "{app_name}", "Images.xcassets", "AppIcon.appiconset")


# =========================
# 环境变量
# =========================
def project_dir() -> str:
    return os.environ.get("LAUNCHER_PROJECT_DIR") or os.getcwd()

def env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in ("1", "true", "yes")


# =========================
# 工具函数
# =========================
def _root(root: str | None) -> str:
    return root if root else project_dir()

def config_path(root: str | None = None) -> str:
    return os.path.join(_root(root), CONFIG_FILENAME)

def _read_json(path: str) -> dict:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)

def _write_json(path: str, data: dict):
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False, indent=2)


# =========================
# 对外主入口
# =========================
def ensure_config(root: str | None = None) -> bool:
    """
    launcher.json 不存在时写入默认配置，已存在则不动
    """
    path = config_path(root)
    if os.path.exists(path):
        print(f"[CONFIG] {CONFIG_FILENAME} already exists. Skipping creation.", flush=True)
        return False

    # write errors are fatal for the whole run
    _write_json(path, DEFAULT_CONFIG)
    print(f"[CONFIG] {CONFIG_FILENAME} created at {path}", flush=True)
    return True

def load_config(root: str | None = None) -> dict:
    data = _read_json(config_path(root))
    for platform in ("ios", "android"):
        if not isinstance(data.get(platform), dict) or "icon" not in data[platform]:
            raise ValueError(f"{CONFIG_FILENAME}: missing '{platform}.icon'")
    return data

def read_app_name(root: str | None = None) -> str:
    data = _read_json(os.path.join(_root(root), PACKAGE_FILENAME))
    name = data.get("name")
    if not name:
        raise ValueError(f"{PACKAGE_FILENAME}: missing 'name'")
    return name

def project_paths(root: str | None, app_name: str) -> dict:
    """
    所有输出路径（相对路径按项目根目录展开）
    """
    base = _root(root)
    return {
        "android_res": os.path.join(base, ANDROID_RES_DIR),
        "android_manifest": os.path.join(base, ANDROID_MANIFEST),
        "ios_icons": os.path.join(base, IOS_ICON_DIR.format(app_name=app_name)),
    }

def resolve_icon(root: str | None, icon_path: str) -> str:
    return os.path.join(_root(root), icon_path)
