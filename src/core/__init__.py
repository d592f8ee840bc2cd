"""
Core decimal value types, arithmetic kernel and serialization contracts.

Модуль содержит фундаментальные строительные блоки, не зависящие от внешних систем:
- math: целочисленное ядро и разложение float64
- conversion: разбор и форматирование десятичных строк
- domain: Value, Signed, Fixed
- contracts: JSON-кодек, JSON Schema контракты, интеграция с pydantic
"""
