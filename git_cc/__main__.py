"""Allow running git-cc with `python -m git_cc`."""

from git_cc.cli import app

if __name__ == "__main__":
    app()
