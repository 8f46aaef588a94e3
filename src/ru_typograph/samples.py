"""
Demonstration text covering every rule of both pipelines.
"""

from __future__ import annotations

EXAMPLE_TEXT = """Пример текста с   типографскими ошибками

Проблемы  с   пробелами    и знаками   ,точками   .
Дефисы  --  вместо тире и многоточие...
Плохие пробелы в скобках( вот так ).

Неразрывные пробелы:
В магазин за хлебом.
К врачу на осмотр.
На работу в офис.
Вес: 10 кг, рост: 180 см.
А. С. Пушкин написал много произведений.

Диалоги:
- Привет! Как дела?
- Хорошо, спасибо за вопрос.

Проценты: скидка 15% на все товары.

ПРИМЕР СТИХОТВОРЕНИЯ:

        Белеет парус одинокой
        В тумане моря голубом...
        Что ищет он в стране далекой?
        Что кинул он в краю родном?

    Играют волны -- ветер свищет,
    И мачта гнется и скрыпит...
        Увы! он счастия не ищет
        И не от счастия бежит!

Под ним струя светлей лазури,
Над ним луч солнца золотой...
    А он, мятежный, просит бури,
    Как будто в бурях есть покой!

Этот текст содержит различные типографские ошибки и демонстрирует работу с поэзией."""

EXAMPLE_POEM = """        Белеет парус одинокой
        В тумане моря голубом...
        Что ищет он в стране далекой?
        Что кинул он в краю родном?"""
