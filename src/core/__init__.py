"""
Core — общая инфраструктура каталога паттернов.

Логирование (structlog) и JSON Schema контракты. Не зависит от
конкретных паттернов.
"""
