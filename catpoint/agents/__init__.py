from .classifier import ImageClassifier, FakeImageClassifier
