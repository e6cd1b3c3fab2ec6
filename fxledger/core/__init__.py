"""
Core: доменные модели, денежная арифметика и контракты данных.

Модули не зависят от файловой системы и логирования прогона.
"""
