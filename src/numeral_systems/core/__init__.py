"""
Core: errors, safe integer arithmetic, domain models and contracts.

Не зависит от внешних источников данных (файлов, реестров).
"""
