"""Command-line interface for wav2syx."""
