from setuptools import find_packages, setup
from setuptools.command.install import install
import sys


class InstallXBParams(install):
    """Installs xbparams and reminds where the default response file lives."""

    def run(self):
        super().run()

        print(f"✔ xbparams installed for {sys.executable}")
        print(
            "\n⚠  Place an optional 'xbuild.rsp' next to the xbparams script "
            "or point XBPARAMS_BIN_PATH at the directory holding it."
        )


setup(
    name="xbparams",
    version="1.0.0",
    description="Command-line and response-file argument interpreter for xbuild-style build front ends",
    author="GAHEOS",
    python_requires=">=3.8",
    package_dir={"": "src"},
    packages=find_packages(where="src", include=["xbparams", "xbparams.*"]),
    extras_require={"test": ["pytest>=7"]},
    entry_points={"console_scripts": ["xbparams=xbparams.cli:main"]},
    cmdclass={"install": InstallXBParams},
)
