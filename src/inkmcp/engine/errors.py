"""Errors raised by the color engine.

All of them are deterministic and caused by the input, so retrying the same
call cannot succeed. They subclass ValueError so FastMCP and FastAPI treat
them as client errors when they escape a handler.
"""


class InkEngineError(ValueError):
    """Base class for engine failures"""


class InvalidFormat(InkEngineError):
    """A hex color string is malformed"""


class InvalidArgument(InkEngineError):
    """A size or limit parameter is not a positive integer"""


class UnknownTheme(InkEngineError):
    """Theme is neither a built-in name nor a hex / hex-list"""

    def __init__(self, theme: str, themes: list[str]):
        self.theme = theme
        self.themes = list(themes)
        super().__init__(
            f'Unknown theme: "{theme}". Available themes are: {", ".join(self.themes)}'
        )


class UnknownHarmonyRule(InkEngineError):
    """Harmony rule name is not in the fixed rule set"""

    def __init__(self, rule: str, rules: list[str]):
        self.rule = rule
        self.rules = list(rules)
        super().__init__(
            f'Unknown harmony rule: "{rule}". Valid rules are: {", ".join(self.rules)}'
        )


class InvalidBaseColor(InkEngineError):
    """Harmony requested but the theme is not a single valid hex color"""

    def __init__(self, theme: str):
        self.theme = theme
        super().__init__(
            "Invalid base color for harmony rule. Please use a single valid hex code."
        )


class InvalidCustomPalette(InkEngineError):
    """A comma-separated custom palette has an unparseable segment"""

    def __init__(self, segment: str):
        self.segment = segment
        super().__init__(
            "Invalid custom palette format. Please use a comma-separated list of "
            'hex codes, e.g., "#FF0000,#00FF00,#0000FF"'
        )
