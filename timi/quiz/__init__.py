"""Caller-side quiz support: question bank and in-progress sessions."""

from timi.quiz.questions import QUESTIONS, Question, get_question
from timi.quiz.session import QuizCompleteError, QuizSession

__all__ = ["QUESTIONS", "Question", "QuizCompleteError", "QuizSession", "get_question"]
