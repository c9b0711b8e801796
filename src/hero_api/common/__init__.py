"""共通モジュール."""
