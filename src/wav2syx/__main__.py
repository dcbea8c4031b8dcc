"""Allow ``python -m wav2syx``."""

from wav2syx.cli.cli import app

if __name__ == "__main__":
    app()
