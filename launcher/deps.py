# launcher/deps.py - uv / pip install state of the runtime packages
import os
import subprocess
import sys

# Imaging is the only concern Python needs from outside the standard library
MANAGED_PACKAGES = ("Pillow",)


def _run(cmd: list[str]) -> subprocess.CompletedProcess:
    return subprocess.run(cmd, check=True, capture_output=True, text=True)


def preferred_tool_available() -> bool:
    """Is the fast installer (uv) usable?"""
    forced = os.environ.get("LAUNCHER_INSTALLER", "").strip().lower()
    if forced:
        return forced == "uv"
    try:
        _run(["uv", "--version"])
        return True
    except (OSError, subprocess.CalledProcessError):
        return False


# =========================
# 依赖提供者
# =========================
class DependencyProvider:
    """Install state of a package. Subclass or fake this in tests."""

    def is_installed(self, package: str) -> bool:
        raise NotImplementedError

    def install(self, package: str):
        raise NotImplementedError

    def uninstall(self, package: str):
        raise NotImplementedError


class PipProvider(DependencyProvider):
    def __init__(self, use_uv: bool | None = None):
        self.use_uv = preferred_tool_available() if use_uv is None else use_uv

    def _base(self) -> list[str]:
        if self.use_uv:
            return ["uv", "pip"]
        return [sys.executable, "-m", "pip"]

    def _target(self) -> list[str]:
        # uv needs to be pointed at the interpreter we are running in
        return ["--python", sys.executable] if self.use_uv else []

    def is_installed(self, package: str) -> bool:
        try:
            _run(self._base() + ["show"] + self._target() + [package])
            return True
        except (OSError, subprocess.CalledProcessError):
            return False

    def install(self, package: str):
        _run(self._base() + ["install"] + self._target() + [package])

    def uninstall(self, package: str):
        flags = [] if self.use_uv else ["-y"]
        _run(self._base() + ["uninstall"] + flags + self._target() + [package])


# =========================
# 对外主入口
# =========================
def ensure_installed(package: str, provider: DependencyProvider) -> bool:
    if provider.is_installed(package):
        print(f"[DEPS] {package} is already installed.", flush=True)
        return True

    print(f"[DEPS] Installing {package}...", flush=True)
    try:
        provider.install(package)
    except Exception as e:
        print(f"[ERROR] Installing {package} failed: {e}", flush=True)
        return False
    print(f"[DEPS] {package} installed successfully.", flush=True)
    return True


def ensure_uninstalled(package: str, provider: DependencyProvider) -> bool:
    if not provider.is_installed(package):
        print(f"[DEPS] {package} is already uninstalled.", flush=True)
        return True

    print(f"[DEPS] Uninstalling {package}...", flush=True)
    try:
        provider.uninstall(package)
    except Exception as e:
        print(f"[ERROR] Uninstalling {package} failed: {e}", flush=True)
        return False
    print(f"[DEPS] {package} uninstalled successfully.", flush=True)
    return True
