"""データベース関連モジュール."""
