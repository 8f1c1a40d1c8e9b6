# -*- coding: utf-8 -*-

import logging
import sys
import types


def getLogger(name=None):
    logger = logging.getLogger(name)

    def fatal(target, msg, *args, **kwargs):
        target.error(msg, *args, **kwargs)
        logging.shutdown()
        sys.exit(-1)

    logger.fatal = types.MethodType(fatal, logger)

    return logger
