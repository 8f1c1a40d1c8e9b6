# -*- coding: utf-8 -*-
import random
from abc import ABC, abstractmethod

from ..util import getLogger


LOGGER = getLogger(__name__)


class ImageClassifier(ABC):
    """
    Tells whether a camera image shows a cat with at least the given
    confidence (0 to 100).
    """

    @abstractmethod
    def contains_cat(self, image, confidence_threshold):
        pass


class FakeImageClassifier(ImageClassifier):
    """
    Stand-in classifier that guesses at random.
    """

    def __init__(self, seed=None):
        self.random = random.Random(seed)

    def contains_cat(self, image, confidence_threshold):
        guess = self.random.random() < 0.5
        LOGGER.debug("Guessed cat=%s for image %r (threshold %.1f)", guess, image, confidence_threshold)
        return guess
