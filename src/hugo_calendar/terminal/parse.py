# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum
import typer

from hugo_calendar.error import InvalidMonth
from hugo_calendar.service.month_range import parse_month


def parse_month_option(month_param: Optional[str]) -> Optional[pendulum.Date]:
    if month_param is None:
        return None
    try:
        return parse_month(month_param)
    except InvalidMonth as e:
        raise typer.BadParameter(str(e)) from e
