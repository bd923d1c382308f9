# launcher/app.py
import sys

from .config import (
    ensure_config, env_flag, load_config, project_dir, project_paths,
    read_app_name, resolve_icon,
)
from .deps import MANAGED_PACKAGES, PipProvider, ensure_installed, ensure_uninstalled

STEPS = ("android_regular", "android_round", "ios", "manifest_regular", "manifest_round")


# =========================
# 依赖清理
# =========================
def cleanup_dependencies(provider, packages=MANAGED_PACKAGES):
    for package in reversed(packages):
        ensure_uninstalled(package, provider)


# =========================
# 生成流程
# =========================
def generate_assets(root: str) -> dict:
    # imaging modules are imported only once their dependencies are in place
    from .icon_gen import ICON_NAME, ROUND_ICON_NAME, generate_mipmap_icons
    from .ios_icons import generate_ios_icons
    from .manifest import update_manifest_icon

    launcher = load_config(root)
    paths = project_paths(root, read_app_name(root))
    android_icon = resolve_icon(root, launcher["android"]["icon"])
    ios_icon = resolve_icon(root, launcher["ios"]["icon"])

    status = {}
    status["android_regular"] = generate_mipmap_icons(android_icon, paths["android_res"])
    status["android_round"] = generate_mipmap_icons(android_icon, paths["android_res"], rounded=True)
    status["ios"] = generate_ios_icons(ios_icon, paths["ios_icons"])

    # the second update overwrites the first: the manifest ends up on the round icon
    status["manifest_regular"] = update_manifest_icon(paths["android_manifest"], ICON_NAME)
    status["manifest_round"] = update_manifest_icon(paths["android_manifest"], ROUND_ICON_NAME, rounded=True)
    return status


def run(root: str | None = None, provider=None, cleanup: bool = True) -> dict:
    """
    config -> 依赖 -> Android -> iOS -> manifest -> 卸载依赖
    """
    root = root or project_dir()
    ensure_config(root)

    if provider is None:
        provider = PipProvider()
    for package in MANAGED_PACKAGES:
        ensure_installed(package, provider)

    try:
        status = generate_assets(root)
    finally:
        # runs only once every step above has returned or raised
        if cleanup and not env_flag("LAUNCHER_KEEP_DEPS"):
            cleanup_dependencies(provider)

    failed = [step for step in STEPS if not status.get(step)]
    if failed:
        print(f"[PIPELINE] Finished with failed steps: {', '.join(failed)}", flush=True)
    else:
        print("[PIPELINE] All icons generated and manifest updated.", flush=True)
    return status


# =========================
# 命令行入口
# =========================
def main() -> int:
    status = run()
    if env_flag("LAUNCHER_STRICT") and not all(status.values()):
        return 1
    return 0


def init_main() -> int:
    ensure_config()
    return 0


if __name__ == "__main__":
    sys.exit(main())
