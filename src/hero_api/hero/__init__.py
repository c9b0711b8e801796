"""ヒーローAPIモジュール."""
