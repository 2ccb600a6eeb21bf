"""Adapters Django: persistência, API JSON e segurança."""
