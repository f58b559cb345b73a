import unittest

from langchain_core.language_models import FakeListChatModel

from mock_interview.errors import EvaluationError
from mock_interview.interview import DEFAULT_EVALUATION, AnswerEvaluator, Evaluation

from tests.fakes import EVALUATION_JSON, FailingChatModel, RecordingChatModel

QUESTION = "How does a hash map resolve collisions?"
ANSWER = "With chaining or open addressing."


def evaluator_returning(text: str) -> AnswerEvaluator:
    return AnswerEvaluator(llm=FakeListChatModel(responses=[text]))


class AnswerEvaluatorTests(unittest.TestCase):
    def test_valid_json_is_parsed(self):
        evaluation = evaluator_returning(EVALUATION_JSON).evaluate(QUESTION, ANSWER)

        self.assertEqual(evaluation.score, 3)
        self.assertEqual(evaluation.rating, "Good")
        self.assertEqual(evaluation.feedback, "Correct and well structured, misses edge cases.")
        self.assertEqual(evaluation.follow_up, "How would you test this under load?")

    def test_fenced_json_is_parsed(self):
        evaluation = evaluator_returning(f"```json\n{EVALUATION_JSON}\n```").evaluate(QUESTION, ANSWER)
        self.assertEqual(evaluation.rating, "Good")

    def test_serializes_follow_up_as_camel_case(self):
        evaluation = evaluator_returning(EVALUATION_JSON).evaluate(QUESTION, ANSWER)
        self.assertEqual(
            evaluation.model_dump(by_alias=True),
            {
                "score": 3,
                "rating": "Good",
                "feedback": "Correct and well structured, misses edge cases.",
                "followUp": "How would you test this under load?",
            },
        )

    def test_prompt_contains_question_answer_and_format_instructions(self):
        llm = RecordingChatModel(responses=[EVALUATION_JSON])
        AnswerEvaluator(llm=llm).evaluate(QUESTION, ANSWER)

        system, human = llm.prompts[0]
        self.assertIn(f"Question: {QUESTION}", system.content)
        self.assertIn(f"Answer: {ANSWER}", system.content)
        self.assertIn("followUp", system.content)
        self.assertIn("JSON schema", system.content)
        self.assertEqual(human.content, "Evaluate this answer strictly following the format.")

    def test_answer_with_braces_is_passed_verbatim(self):
        llm = RecordingChatModel(responses=[EVALUATION_JSON])
        AnswerEvaluator(llm=llm).evaluate(QUESTION, "return {key: value}")
        self.assertIn("return {key: value}", llm.prompts[0][0].content)


class EvaluationFallbackTests(unittest.TestCase):
    def assertFallback(self, evaluation: Evaluation):
        self.assertEqual(evaluation, DEFAULT_EVALUATION)
        self.assertEqual(evaluation.score, 2)
        self.assertEqual(evaluation.rating, "Fair")
        self.assertEqual(evaluation.feedback, "The answer showed basic understanding but needs improvement")
        self.assertEqual(evaluation.follow_up, "Can you explain this concept in more detail?")

    def test_llm_failure_falls_back(self):
        self.assertFallback(AnswerEvaluator(llm=FailingChatModel()).evaluate(QUESTION, ANSWER))

    def test_non_json_response_falls_back(self):
        self.assertFallback(evaluator_returning("Great answer, 4/4!").evaluate(QUESTION, ANSWER))

    def test_score_out_of_range_falls_back(self):
        bad = '{"score": 7, "rating": "Good", "feedback": "ok", "followUp": "why?"}'
        self.assertFallback(evaluator_returning(bad).evaluate(QUESTION, ANSWER))

    def test_unknown_rating_falls_back(self):
        bad = '{"score": 4, "rating": "Outstanding", "feedback": "ok", "followUp": "why?"}'
        self.assertFallback(evaluator_returning(bad).evaluate(QUESTION, ANSWER))

    def test_empty_feedback_falls_back(self):
        bad = '{"score": 1, "rating": "Poor", "feedback": "  ", "followUp": "why?"}'
        self.assertFallback(evaluator_returning(bad).evaluate(QUESTION, ANSWER))

    def test_missing_field_falls_back(self):
        bad = '{"score": 1, "rating": "Poor", "feedback": "Off topic"}'
        self.assertFallback(evaluator_returning(bad).evaluate(QUESTION, ANSWER))

    def test_try_evaluate_propagates_failures(self):
        with self.assertRaises(EvaluationError):
            evaluator_returning("not json").try_evaluate(QUESTION, ANSWER)
        with self.assertRaises(EvaluationError):
            AnswerEvaluator(llm=FailingChatModel()).try_evaluate(QUESTION, ANSWER)

    def test_fallback_is_a_fresh_copy(self):
        evaluation = AnswerEvaluator(llm=FailingChatModel()).evaluate(QUESTION, ANSWER)
        self.assertIsNot(evaluation, DEFAULT_EVALUATION)


if __name__ == "__main__":
    unittest.main()
