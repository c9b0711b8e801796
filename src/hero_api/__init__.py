"""ヒーローのCRUD APIを提供するパッケージ."""
