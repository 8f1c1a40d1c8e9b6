# -*- coding: utf-8 -*-
# Status events fired by the security service

from events import Events


class SecurityEvents(Events):
    __events__ = (
        'alarm_status_changed',
        'cat_detected',
    )
