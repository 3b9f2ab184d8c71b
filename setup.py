from pathlib import Path

from setuptools import find_packages, setup

ROOT = Path(__file__).parent

# Read requirements (ignore comments and recursive -r entries)
req_path = ROOT / "requirements.txt"
requirements = []
if req_path.exists():
    for line in req_path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#") or line.startswith("-r"):
            continue
        requirements.append(line)

readme = (ROOT / "README.md").read_text(encoding="utf-8") if (ROOT / "README.md").exists() else ""

setup(
    name="proxmox-sensors-mqtt",
    version="1.0.0",
    description="Publish lm-sensors temperatures to Home Assistant via MQTT discovery",
    long_description=readme,
    long_description_content_type="text/markdown",
    packages=find_packages(include=("proxsensors", "proxsensors.*")),
    python_requires=">=3.10,<4",
    install_requires=requirements,
    extras_require={
        "test": ["pytest>=7.4.0", "pytest-cov>=4.1.0"],
        "dev": [
            "pytest>=7.4.0",
            "pytest-cov>=4.1.0",
            "black>=23.7.0",
            "flake8>=6.0.0",
            "mypy>=1.5.0",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: System Administrators",
        "Topic :: Home Automation",
        "Topic :: System :: Monitoring",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Operating System :: POSIX :: Linux",
    ],
    keywords="proxmox lm-sensors mqtt home-assistant temperature monitoring",
    entry_points={
        "console_scripts": [
            "proxsensors-publish=proxsensors.workers.publisher_cli:main",
        ]
    },
)
