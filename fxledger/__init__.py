"""
fxledger — конвертация валют в мультивалютных кошельках пользователей.

Ядро: цепочка проверок (validation) → pivot-конверсия (core.math) →
settlement кошелька (settlement). Загрузка/сохранение и рендеринг сообщений
вынесены в io, reporting и runner.
"""

__version__ = "0.1.0"
