"""Core building blocks shared by the scaffolding engine and chart library."""
