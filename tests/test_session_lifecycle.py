import threading
import unittest
import uuid

from langchain_core.language_models import FakeListChatModel

from mock_interview.errors import (
    NotFoundError,
    QuestionGenerationError,
    SessionCompleteError,
    ValidationError
)
from mock_interview.interview import (
    DEFAULT_EVALUATION,
    AnswerEvaluator,
    InMemorySessionStore,
    InterviewSessionManager,
    QuestionGenerator,
    SessionStatus
)

from tests.fakes import EVALUATION_JSON, QUESTIONS_TEXT, FailingChatModel


def build_manager(question_llm=None, evaluation_llm=None, store=None) -> InterviewSessionManager:
    return InterviewSessionManager(
        store=store or InMemorySessionStore(),
        question_generator=QuestionGenerator(
            llm=question_llm or FakeListChatModel(responses=[QUESTIONS_TEXT])
        ),
        answer_evaluator=AnswerEvaluator(
            llm=evaluation_llm or FakeListChatModel(responses=[EVALUATION_JSON])
        ),
    )


class InMemorySessionStoreTests(unittest.TestCase):
    def setUp(self):
        self.store = InMemorySessionStore()

    def test_create_allocates_unique_uuid_ids(self):
        ids = {self.store.create("Dev", ["python"], ["Q1"]).session_id for _ in range(50)}

        self.assertEqual(len(ids), 50)
        for session_id in ids:
            uuid.UUID(session_id)
        self.assertEqual(self.store.count(), 50)

    def test_get_unknown_returns_none(self):
        self.assertIsNone(self.store.get("missing"))

    def test_get_returns_copies(self):
        created = self.store.create("Dev", ["python"], ["Q1", "Q2"])

        fetched = self.store.get(created.session_id)
        fetched.current_question_index = 1
        fetched.keywords.append("rust")

        stored = self.store.get(created.session_id)
        self.assertEqual(stored.current_question_index, 0)
        self.assertEqual(stored.keywords, ["python"])

    def test_update_persists_changes(self):
        created = self.store.create("Dev", ["python"], ["Q1", "Q2"])
        created.current_question_index = 1

        self.store.update(created)

        self.assertEqual(self.store.get(created.session_id).current_question_index, 1)

    def test_update_unknown_session_raises(self):
        orphan = InMemorySessionStore().create("Dev", ["python"], ["Q1"])
        with self.assertRaises(KeyError):
            self.store.update(orphan)


class StartInterviewTests(unittest.TestCase):
    def test_fresh_session_starts_at_first_question(self):
        manager = build_manager()

        session = manager.start_interview("Backend Engineer", ["python", "django"])

        self.assertEqual(session.current_question_index, 0)
        self.assertEqual(session.answers, [])
        self.assertEqual(session.status, SessionStatus.ACTIVE)
        self.assertEqual(len(session.questions), 3)
        self.assertEqual(session.current_question, session.questions[0])
        self.assertEqual(manager.get_session(session.session_id), session)

    def test_missing_position_or_keywords_is_rejected(self):
        manager = build_manager()
        for position, keywords in [(None, ["python"]), ("", ["python"]), ("  ", ["python"]),
                                   ("Dev", None), ("Dev", [])]:
            with self.assertRaises(ValidationError):
                manager.start_interview(position, keywords)
        self.assertEqual(manager.store.count(), 0)

    def test_generation_failure_creates_no_session(self):
        manager = build_manager(question_llm=FailingChatModel())

        with self.assertRaises(QuestionGenerationError):
            manager.start_interview("Dev", ["python"])
        self.assertEqual(manager.store.count(), 0)

    def test_empty_question_list_is_an_upstream_failure(self):
        manager = build_manager(question_llm=FakeListChatModel(responses=["\n\n"]))

        with self.assertRaises(QuestionGenerationError):
            manager.start_interview("Dev", ["python"])
        self.assertEqual(manager.store.count(), 0)


class EvaluateAnswerTests(unittest.TestCase):
    def setUp(self):
        self.manager = build_manager()
        self.session = self.manager.start_interview("Backend Engineer", ["python", "django"])
        self.total = len(self.session.questions)

    def test_full_interview_lifecycle(self):
        for i in range(self.total - 1):
            outcome = self.manager.evaluate_answer(self.session.session_id, f"answer {i}")
            self.assertFalse(outcome.is_complete)
            self.assertEqual(outcome.next_question, self.session.questions[i + 1])
            self.assertIsNone(outcome.summary)
            self.assertEqual(outcome.evaluation.rating, "Good")

        outcome = self.manager.evaluate_answer(self.session.session_id, "final answer")

        self.assertTrue(outcome.is_complete)
        self.assertIsNone(outcome.next_question)
        self.assertEqual(len(outcome.summary), self.total)
        self.assertEqual([r.question for r in outcome.summary], self.session.questions)
        self.assertEqual(outcome.summary[-1].answer, "final answer")

        stored = self.manager.get_session(self.session.session_id)
        self.assertEqual(stored.status, SessionStatus.COMPLETE)
        self.assertEqual(stored.current_question_index, self.total - 1)
        self.assertEqual(len(stored.answers), self.total)

    def test_unknown_session_is_not_found_and_nothing_changes(self):
        before = self.manager.get_session(self.session.session_id)

        with self.assertRaises(NotFoundError):
            self.manager.evaluate_answer("no-such-session", "answer")
        with self.assertRaises(NotFoundError):
            self.manager.evaluate_answer(None, "answer")

        self.assertEqual(self.manager.get_session(self.session.session_id), before)

    def test_missing_answer_is_rejected_without_state_change(self):
        for answer in [None, "", "   "]:
            with self.assertRaises(ValidationError):
                self.manager.evaluate_answer(self.session.session_id, answer)

        stored = self.manager.get_session(self.session.session_id)
        self.assertEqual(stored.current_question_index, 0)
        self.assertEqual(stored.answers, [])

    def test_completed_session_rejects_further_answers(self):
        for i in range(self.total):
            self.manager.evaluate_answer(self.session.session_id, f"answer {i}")
        before = self.manager.get_session(self.session.session_id)

        with self.assertRaises(SessionCompleteError):
            self.manager.evaluate_answer(self.session.session_id, "one more")

        self.assertEqual(self.manager.get_session(self.session.session_id), before)

    def test_evaluator_failure_uses_fallback_and_still_advances(self):
        manager = build_manager(evaluation_llm=FailingChatModel())
        session = manager.start_interview("Dev", ["python"])

        outcome = manager.evaluate_answer(session.session_id, "answer")

        self.assertEqual(outcome.evaluation, DEFAULT_EVALUATION)
        self.assertFalse(outcome.is_complete)
        self.assertEqual(outcome.next_question, session.questions[1])
        stored = manager.get_session(session.session_id)
        self.assertEqual(stored.answers[0].evaluation, DEFAULT_EVALUATION)

    def test_evaluator_failure_on_last_question_completes_session(self):
        manager = build_manager(evaluation_llm=FailingChatModel())
        session = manager.start_interview("Dev", ["python"])
        for i in range(len(session.questions) - 1):
            manager.evaluate_answer(session.session_id, f"answer {i}")

        outcome = manager.evaluate_answer(session.session_id, "last")

        self.assertTrue(outcome.is_complete)
        self.assertEqual(len(outcome.summary), len(session.questions))

    def test_concurrent_answers_are_serialized(self):
        errors = []
        outcomes = []

        def submit(i):
            try:
                outcomes.append(self.manager.evaluate_answer(self.session.session_id, f"answer {i}"))
            except Exception as e:  # collected for the assertion below
                errors.append(e)

        threads = [threading.Thread(target=submit, args=(i,)) for i in range(self.total)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        self.assertEqual(errors, [])
        self.assertEqual(sum(1 for o in outcomes if o.is_complete), 1)
        stored = self.manager.get_session(self.session.session_id)
        self.assertEqual(len(stored.answers), self.total)
        self.assertEqual([r.question for r in stored.answers], self.session.questions)


if __name__ == "__main__":
    unittest.main()
