"""
Platform-specific Docker installation guidance.
"""

import platform as _platform
from typing import Optional

from pgdock.core.models import InstallInstructions, Platform


DOCS_URL = "https://docs.docker.com/get-docker/"
DESKTOP_URL = "https://www.docker.com/products/docker-desktop/"

INSTALL_INSTRUCTIONS = {
    Platform.WINDOWS: InstallInstructions(
        title="Install Docker Desktop for Windows",
        steps=(
            "1. Download Docker Desktop:",
            f"   {DESKTOP_URL}",
            "",
            "2. Run the installer (Docker Desktop Installer.exe)",
            "",
            "3. Follow the installation wizard",
            "",
            "4. Restart your computer if prompted",
            "",
            "5. Start Docker Desktop from the Start menu",
            "",
            "6. Wait for Docker Desktop to fully start (whale icon in system tray)",
            "",
            "7. Run this command again: check-docker",
        ),
        download_url="https://desktop.docker.com/win/main/amd64/Docker%20Desktop%20Installer.exe",
    ),
    Platform.MACOS: InstallInstructions(
        title="Install Docker Desktop for Mac",
        steps=(
            "1. Download Docker Desktop:",
            f"   {DESKTOP_URL}",
            "",
            "2. Open the downloaded .dmg file",
            "",
            "3. Drag Docker to Applications folder",
            "",
            "4. Open Docker from Applications",
            "",
            "5. Wait for Docker Desktop to fully start",
            "",
            "6. Run this command again: check-docker",
        ),
        download_url="https://desktop.docker.com/mac/main/amd64/Docker.dmg",
    ),
    Platform.LINUX: InstallInstructions(
        title="Install Docker for Linux",
        steps=(
            "1. Install Docker Engine:",
            "   Ubuntu/Debian:",
            "   sudo apt-get update",
            "   sudo apt-get install docker.io docker-compose",
            "",
            "2. Start Docker service:",
            "   sudo systemctl start docker",
            "   sudo systemctl enable docker",
            "",
            "3. Add your user to docker group (optional):",
            "   sudo usermod -aG docker $USER",
            "   (logout and login again)",
            "",
            "4. Run this command again: check-docker",
        ),
        download_url="https://docs.docker.com/engine/install/",
    ),
}

# One line per platform, always shown together
START_HINTS = (
    '  - Windows: Search for "Docker Desktop" in Start menu',
    "  - Mac: Open Docker from Applications",
    "  - Linux: sudo systemctl start docker",
)


def detect_platform(system: Optional[str] = None) -> Platform:
    """Map an OS name (default: the running one) onto a guidance bucket."""
    if system is None:
        system = _platform.system()

    name = system.lower()
    if name in ("windows", "win32") or name.startswith(("cygwin", "msys")):
        return Platform.WINDOWS
    elif name in ("darwin", "macos"):
        return Platform.MACOS
    return Platform.LINUX


def get_install_instructions(platform: Optional[Platform] = None) -> InstallInstructions:
    """Get the installation instructions for a platform (default: the running one)."""
    if platform is None:
        platform = detect_platform()
    return INSTALL_INSTRUCTIONS.get(platform, INSTALL_INSTRUCTIONS[Platform.LINUX])
