# -*- coding: utf-8 -*-

from .mdlite import (
        __version__,
        parse,
        render_to,
        render_inline,
        escape_html,
        split_row,
        Parser,
        Placeholders,
        BlockMatch,
        BlockFactory,
        MarkdownLiteError,
        ArgumentRequiredError,
        main,
        )
