"""Django App acadêmico: models, mappers, repositórios e API JSON."""
