"""单位选项的分组构造与搜索匹配。"""

from __future__ import annotations

from typing import Iterable, List

from apps.query_builder.contracts.units import UnitGroup, UnitOption
from apps.query_builder.stores.unit_taxonomy import UnitTaxonomy


def options_for_category(*, taxonomy: UnitTaxonomy, name: str) -> List[UnitOption]:
    """返回单个分类的单位选项，未知分类返回空列表。

    Parameters
    ----------
    taxonomy: UnitTaxonomy
        单位目录。
    name: str
        分类名称。

    Returns
    -------
    List[UnitOption]
        与目录声明顺序一致的选项。
    """

    return [UnitOption(value=option.value, label=option.label) for option in taxonomy.lookup(name)]


def build_grouped_options(*, taxonomy: UnitTaxonomy, categories: Iterable[str]) -> List[UnitGroup]:
    """按给定分类顺序构造展示用的分组列表。

    Parameters
    ----------
    taxonomy: UnitTaxonomy
        单位目录。
    categories: Iterable[str]
        需要展示的分类，顺序即分组顺序。

    Returns
    -------
    List[UnitGroup]
        每个分类一个分组，未知分类对应空分组。
    """

    return [
        UnitGroup(label=category, options=options_for_category(taxonomy=taxonomy, name=category))
        for category in categories
    ]


def matches(input_text: str, candidate_label: str) -> bool:
    """判断候选展示文本是否包含输入文本，忽略大小写。"""

    if not input_text:
        return True
    return input_text.casefold() in candidate_label.casefold()


def filter_grouped_options(*, groups: Iterable[UnitGroup], input_text: str) -> List[UnitGroup]:
    """按搜索文本裁剪分组，不再包含任何选项的分组被省略。

    Parameters
    ----------
    groups: Iterable[UnitGroup]
        完整分组列表。
    input_text: str
        用户输入的搜索文本。

    Returns
    -------
    List[UnitGroup]
        保持原顺序的裁剪结果。
    """

    filtered: List[UnitGroup] = []
    for group in groups:
        kept = [option for option in group.options if matches(input_text, option.label)]
        if not kept:
            continue
        filtered.append(UnitGroup(label=group.label, options=kept))
    return filtered
