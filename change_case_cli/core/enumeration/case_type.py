from enum import Enum


class CaseType(str, Enum):
    CAMEL = "camelCase"

    CAPITAL = "capitalCase"

    CONSTANT = "constantCase"

    DOT = "dotCase"

    KEBAB = "kebabCase"

    NO = "noCase"

    PASCAL = "pascalCase"

    PASCAL_SNAKE = "pascalSnakeCase"

    PATH = "pathCase"

    SENTENCE = "sentenceCase"

    SNAKE = "snakeCase"

    TRAIN = "trainCase"
