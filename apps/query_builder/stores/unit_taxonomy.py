"""只读单位目录，按分类维护可选单位。"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Tuple

from apps.query_builder.contracts.units import UnitCategory, UnitOption


class CategoryNames:
    """内置分类名称。"""

    TIME = "Time"
    DATA = "Data"
    DATA_RATE = "Data Rate"
    THROUGHPUT = "Throughput"
    MISCELLANEOUS = "Miscellaneous"
    BOOLEAN = "Boolean"


# (分类名称, ((单位标识, 展示文本), ...))，顺序即展示顺序。
_BUILTIN_UNITS: Tuple[Tuple[str, Tuple[Tuple[str, str], ...]], ...] = (
    (
        CategoryNames.TIME,
        (
            ("ns", "nanoseconds (ns)"),
            ("µs", "microseconds (µs)"),
            ("ms", "milliseconds (ms)"),
            ("s", "seconds (s)"),
            ("m", "minutes (m)"),
            ("h", "hours (h)"),
            ("d", "days (d)"),
        ),
    ),
    (
        CategoryNames.DATA,
        (
            ("bytes", "bytes(IEC)"),
            ("decbytes", "bytes(SI)"),
            ("bits", "bits(IEC)"),
            ("decbits", "bits(SI)"),
            ("kbytes", "kibibytes"),
            ("deckbytes", "kilobytes"),
            ("mbytes", "mebibytes"),
            ("decmbytes", "megabytes"),
            ("gbytes", "gibibytes"),
            ("decgbytes", "gigabytes"),
            ("tbytes", "tebibytes"),
            ("dectbytes", "terabytes"),
            ("pbytes", "pebibytes"),
            ("decpbytes", "petabytes"),
        ),
    ),
    (
        CategoryNames.DATA_RATE,
        (
            ("binBps", "bytes/sec(IEC)"),
            ("Bps", "bytes/sec(SI)"),
            ("binbps", "bits/sec(IEC)"),
            ("bps", "bits/sec(SI)"),
            ("KiBs", "kibibytes/sec"),
            ("Kibits", "kibibits/sec"),
            ("KBs", "kilobytes/sec"),
            ("Kbits", "kilobits/sec"),
            ("MiBs", "mebibytes/sec"),
            ("Mibits", "mebibits/sec"),
            ("MBs", "megabytes/sec"),
            ("Mbits", "megabits/sec"),
            ("GiBs", "gibibytes/sec"),
            ("Gibits", "gibibits/sec"),
            ("GBs", "gigabytes/sec"),
            ("Gbits", "gigabits/sec"),
            ("TiBs", "tebibytes/sec"),
            ("Tibits", "tebibits/sec"),
            ("TBs", "terabytes/sec"),
            ("Tbits", "terabits/sec"),
            ("PiBs", "pebibytes/sec"),
            ("Pibits", "pebibits/sec"),
            ("PBs", "petabytes/sec"),
            ("Pbits", "petabits/sec"),
        ),
    ),
    (
        CategoryNames.THROUGHPUT,
        (
            ("cps", "counts/sec (cps)"),
            ("ops", "ops/sec (ops)"),
            ("reqps", "requests/sec (rps)"),
            ("rps", "reads/sec (rps)"),
            ("wps", "writes/sec (wps)"),
            ("iops", "I/O ops/sec (iops)"),
            ("cpm", "counts/min (cpm)"),
            ("opm", "ops/min (opm)"),
            ("rpm", "reads/min (rpm)"),
            ("wpm", "writes/min (wpm)"),
        ),
    ),
    (
        CategoryNames.MISCELLANEOUS,
        (
            ("percentunit", "Percent (0.0-1.0)"),
            ("percent", "Percent (0 - 100)"),
            ("none", "None"),
        ),
    ),
    (
        CategoryNames.BOOLEAN,
        (
            ("bool", "True / False"),
            ("bool_yes_no", "Yes / No"),
        ),
    ),
)


def builtin_categories() -> List[UnitCategory]:
    """构造内置单位分类列表。

    Returns
    -------
    List[UnitCategory]
        按声明顺序排列的分类。
    """

    categories: List[UnitCategory] = []
    for name, units in _BUILTIN_UNITS:
        formats = [UnitOption(value=value, label=label) for value, label in units]
        categories.append(UnitCategory(name=name, formats=formats))
    return categories


@dataclass(frozen=True)
class UnitTaxonomy:
    """静态单位目录，构造后不提供任何修改接口。"""

    _categories: Mapping[str, UnitCategory] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def from_categories(cls, categories: Iterable[UnitCategory]) -> "UnitTaxonomy":
        """由分类集合构造目录，分类名称重复时立即失败。

        Parameters
        ----------
        categories: Iterable[UnitCategory]
            按展示顺序排列的分类。

        Returns
        -------
        UnitTaxonomy
            只读目录实例。
        """

        index: Dict[str, UnitCategory] = {}
        for category in categories:
            if category.name in index:
                message = f"分类 {category.name} 重复定义。"
                raise ValueError(message)
            index[category.name] = category
        return cls(_categories=MappingProxyType(index))

    @classmethod
    def builtin(cls) -> "UnitTaxonomy":
        """返回内置单位目录。"""

        return cls.from_categories(builtin_categories())

    def category_names(self) -> List[str]:
        """按声明顺序返回全部分类名称。"""

        return list(self._categories)

    def lookup(self, category_name: str) -> List[UnitOption]:
        """读取分类下的单位选项，未知分类返回空列表。

        Parameters
        ----------
        category_name: str
            分类名称。

        Returns
        -------
        List[UnitOption]
            按声明顺序排列的单位选项副本。
        """

        category = self._categories.get(category_name)
        if category is None:
            return []
        return list(category.formats)

    def require(self, category_name: str) -> UnitCategory:
        """读取分类，不存在时立即失败。

        Parameters
        ----------
        category_name: str
            分类名称。

        Returns
        -------
        UnitCategory
            对应的分类。
        """

        if category_name not in self._categories:
            message = f"category={category_name} 不在单位目录中。"
            raise KeyError(message)
        return self._categories[category_name]
