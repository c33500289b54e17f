"""
Подсчёт баллов по профессиям
"""

from typing import Dict, Mapping, Optional


def add_weights(scores: Mapping[str, int], weights: Optional[Mapping[str, int]]) -> Dict[str, int]:
    """
    Прибавляет веса выбранного ответа к накопленным баллам

    Args:
        scores: текущие баллы {код профессии: сумма}
        weights: веса ответа {код профессии: вклад}

    Returns:
        dict: новые баллы; порядок ключей — порядок первого начисления
    """
    result = dict(scores)
    for code, weight in (weights or {}).items():
        weight = int(weight or 0)
        if weight < 0:
            weight = 0
        result[code] = result.get(code, 0) + weight
    return result


def pick_best_profession(scores: Mapping[str, int]) -> Optional[str]:
    """
    Выбирает профессию с максимальным баллом

    При равенстве побеждает код, встретившийся первым при обходе словаря.
    Пустой словарь или только нулевые баллы — результата нет.
    """
    best = None
    best_score = 0
    for code, score in scores.items():
        if score > best_score:
            best_score = score
            best = code
    return best
