"""
Core: целые числа произвольной точности, модели и контракты сериализации.

Пакет не зависит от внешних систем: только арифметика над limbs,
Pydantic модель снимка значения и JSON Schema контракты.
"""
