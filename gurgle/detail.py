import enum
import typing

from .expr import PostProcessor
from .roll import DiceRoll, GurgleRoll, NumberRoll, ParenthesesRoll, RollNode, TreeRoll


class Language(enum.Enum):
    EN = "en"
    ZH = "zh"


_WORDS: typing.Dict[Language, typing.Dict[str, str]] = {
    Language.EN: {
        "avg": "Avg",
        "max": "Max",
        "min": "Min",
        "target": ", target is ",
        "success": ", success",
        "failed": ", failed",
    },
    Language.ZH: {
        "avg": "平均",
        "max": "最大",
        "min": "最小",
        "target": "，目标 ",
        "success": "，成功",
        "failed": "，失败",
    },
}


class Formatter:
    def __init__(self, language: Language = Language.EN) -> None:
        self.language = language

    def word(self, key: str) -> str:
        return _WORDS[self.language][key]

    def bold(self, text: object) -> str:
        return str(text)


class MarkdownFormatter(Formatter):
    def bold(self, text: object) -> str:
        return f"**{text}**"


PLAIN = Formatter()


def format_dice(roll: DiceRoll, fmt: Formatter) -> str:
    post_processor = roll.post_processor()
    points = [str(x) for x in roll.points()]
    if post_processor is PostProcessor.SUM:
        return "(%s)" % "+".join(points)
    return "%s(%s)" % (fmt.word(post_processor.value), ", ".join(points))


def format_node(node: RollNode, fmt: Formatter = PLAIN) -> str:
    if isinstance(node, NumberRoll):
        return str(node.value())
    elif isinstance(node, DiceRoll):
        return format_dice(node, fmt)
    elif isinstance(node, ParenthesesRoll):
        return "(%s)" % format_node(node.inner, fmt)
    elif isinstance(node, TreeRoll):
        return "%s %s %s" % (
            format_node(node.lhs, fmt),
            node.op.value,
            format_node(node.rhs, fmt),
        )
    raise TypeError("cannot format %r" % (node,))


def format_roll(result: GurgleRoll, fmt: Formatter = PLAIN) -> str:
    """Render a roll like `(3+5+1) + 2 = 11, target is >=10, success`.

    A roll that is a single number is shown without the `= value` part.
    """
    text = format_node(result.expr(), fmt)
    if not isinstance(result.expr(), NumberRoll):
        text += " = " + fmt.bold(result.value())

    checker = result.checker()
    if checker is not None:
        text += fmt.word("target") + str(checker)
        text += fmt.word("success") if result.passed() else fmt.word("failed")
    return text
