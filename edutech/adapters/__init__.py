"""Adapters - implementações de infraestrutura para os Ports do Core."""
