"""
pipeline.py — Złożenie etapów EvalEx w jeden potok.

  tekst → [Validator] → Tokenizer → PostfixConverter → TreeBuilder → Evaluator

evaluate() — zwraca float, błędy (ExpressionError) propagują do wołającego
run()      — nigdy nie rzuca ExpressionError; błąd enkodowany w EvalResult

Etapy są bezstanowe, więc jedną instancję potoku można współdzielić
między wątkami.
"""
from __future__ import annotations

import logging
from typing import Optional

from adapters.evaluator.tree_evaluator import TreeEvaluator
from adapters.postfix_converter.shunting_yard import ShuntingYardConverter
from adapters.tokenizer.scanning_tokenizer import ScanningTokenizer
from adapters.tree_builder.stack_tree_builder import StackTreeBuilder
from adapters.validator.parentheses_validator import ParenthesesValidator
from config import Settings
from contracts import (
    EvalResult,
    ExpressionError,
    ExpressionNode,
    Token,
    UnmatchedParentheses,
    token_text,
)
from ports.evaluator import Evaluator
from ports.postfix_converter import PostfixConverter
from ports.tokenizer import Tokenizer
from ports.tree_builder import TreeBuilder
from ports.validator import Validator

logger = logging.getLogger("evalex.pipeline")


class ExpressionPipeline:
    """Tokenizer → shunting-yard → drzewo → ewaluacja."""

    def __init__(
        self,
        tokenizer: Tokenizer,
        converter: PostfixConverter,
        builder: TreeBuilder,
        evaluator: Evaluator,
        validator: Validator | None = None,
    ) -> None:
        self._tokenizer = tokenizer
        self._converter = converter
        self._builder = builder
        self._evaluator = evaluator
        self._validator = validator

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> ExpressionPipeline:
        settings = settings or Settings()
        right_assoc = ("^",) if settings.power_associativity == "right" else ()
        return cls(
            tokenizer=ScanningTokenizer(),
            converter=ShuntingYardConverter(right_associative=right_assoc),
            builder=StackTreeBuilder(),
            evaluator=TreeEvaluator(),
            validator=ParenthesesValidator() if settings.validate_parentheses else None,
        )

    # -- Etapy -------------------------------------------------------------

    def parse(self, text: str) -> tuple[list[Token], Optional[ExpressionNode]]:
        """Zwraca (ciąg postfiksowy, korzeń drzewa) bez liczenia wartości."""
        self._check(text)
        tokens = self._tokenizer.tokenize(text)
        postfix = self._converter.to_postfix(tokens)
        return postfix, self._builder.build_tree(postfix)

    def evaluate(self, text: str) -> float:
        _, root = self.parse(text)
        return self._evaluator.evaluate(root)

    def run(self, text: str) -> EvalResult:
        postfix: list[Token] = []
        try:
            postfix, root = self.parse(text)
            value, steps = self._evaluator.evaluate_with_steps(root)
        except ExpressionError as exc:
            logger.info("Evaluation of %r failed: %s", text, exc)
            return EvalResult(
                expression=text,
                error=exc.to_error(),
                postfix=[token_text(t) for t in postfix],
            )
        return EvalResult(
            expression=text,
            value=value,
            postfix=[token_text(t) for t in postfix],
            steps=steps,
        )

    # -- Prywatne ----------------------------------------------------------

    def _check(self, text: str) -> None:
        if self._validator is None:
            return
        errors = [i for i in self._validator.validate(text) if i.severity == "error"]
        if errors:
            first = errors[0]
            raise UnmatchedParentheses(first.message, position=first.position)


_DEFAULT_PIPELINE: ExpressionPipeline | None = None


def evaluate_expression(text: str) -> float:
    """Liczy wartość wyrażenia domyślnym potokiem (Settings z env)."""
    global _DEFAULT_PIPELINE
    if _DEFAULT_PIPELINE is None:
        _DEFAULT_PIPELINE = ExpressionPipeline.from_settings()
    return _DEFAULT_PIPELINE.evaluate(text)
