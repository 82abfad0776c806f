import json
import unittest
from unittest import mock

import httpx
from api_case import ApiTestCase

from balancesheet.core import config
from balancesheet.services.llm import (
    FALLBACK_REPLY,
    SYSTEM_PROMPT,
    LLMServiceError,
    request_completion,
)


class AssistRouteTests(ApiTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.headers = self.auth_headers("alice")

    def post_expense(self, category: str, amount: float) -> None:
        body = {"category": category, "amount": amount, "description": category, "date": "2025-01-10"}
        response = self.client.post("/expenses", json=body, headers=self.headers)
        self.assertEqual(response.status_code, 200, response.text)

    def test_expense_question_uses_stored_expenses(self) -> None:
        self.post_expense("Housing", 1500)
        self.post_expense("Food", 500)

        response = self.client.post("/ai/assist", json={"query": "How do I reduce my spending?"}, headers=self.headers)

        self.assertEqual(response.status_code, 200)
        advice = response.json()["advice"]
        self.assertIn("Your largest expense category is Housing (75.0% of total expenses)", advice)
        self.assertIn("Taking on a roommate", advice)

    def test_unmatched_question_gets_overview(self) -> None:
        response = self.client.post("/ai/assist", json={"query": "hello"}, headers=self.headers)

        advice = response.json()["advice"]
        self.assertTrue(advice.startswith("Based on your financial data, here's a comprehensive overview"))
        self.assertIn("You have 0 financial goals.", advice)

    def test_only_own_data_is_considered(self) -> None:
        self.post_expense("Housing", 1500)
        other = self.auth_headers("bob")

        advice = self.client.post("/ai/assist", json={"query": "hello"}, headers=other).json()["advice"]

        self.assertIn("Your monthly expenses total 0.00.", advice)

    def test_requires_authentication(self) -> None:
        response = self.client.post("/ai/assist", json={"query": "hello"})

        self.assertEqual(response.status_code, 401)


class ChatRouteTests(ApiTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.headers = self.auth_headers("alice")

    def test_chat_returns_model_reply(self) -> None:
        self.client.post(
            "/incomes",
            json={"source": "Salary", "category": "Job", "amount": 5000, "type": "active", "frequency": "monthly"},
            headers=self.headers,
        )
        completion = mock.AsyncMock(return_value="Save more.")

        with mock.patch("balancesheet.api.assistant.request_completion", completion):
            response = self.client.post("/ai/chat", json={"message": "Any tips?"}, headers=self.headers)

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"response": "Save more.", "success": True})
        message, context = completion.await_args.args
        self.assertEqual(message, "Any tips?")
        self.assertEqual(context, "INCOMES:\n- Salary: $5000 (monthly)")

    def test_chat_failure(self) -> None:
        completion = mock.AsyncMock(side_effect=LLMServiceError("API error: 502"))

        with mock.patch("balancesheet.api.assistant.request_completion", completion):
            response = self.client.post("/ai/chat", json={"message": "Any tips?"}, headers=self.headers)

        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json(), {"error": "Failed to generate AI response", "success": False})

    def test_chat_with_garbled_upstream_reply(self) -> None:
        transport = httpx.MockTransport(lambda request: httpx.Response(200, text="<html>oops</html>"))

        async def completion_from_garbled_upstream(message, context):
            return await request_completion(message, context, transport=transport)

        with mock.patch.object(config, "OPENROUTER_API_KEY", "test-key"), mock.patch(
            "balancesheet.api.assistant.request_completion", completion_from_garbled_upstream
        ):
            response = self.client.post("/ai/chat", json={"message": "Any tips?"}, headers=self.headers)

        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json(), {"error": "Failed to generate AI response", "success": False})


class RequestCompletionTests(unittest.IsolatedAsyncioTestCase):
    def setUp(self) -> None:
        patcher = mock.patch.multiple(config, OPENROUTER_API_KEY="test-key", OPENROUTER_REFERER="https://app.example.com")
        patcher.start()
        self.addCleanup(patcher.stop)

    async def test_sends_prompt_with_context(self) -> None:
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["body"] = json.loads(request.content)
            seen["auth"] = request.headers["Authorization"]
            seen["referer"] = request.headers.get("HTTP-Referer")
            seen["title"] = request.headers.get("X-Title")
            return httpx.Response(200, json={"choices": [{"message": {"content": "  Pay off the card first.\n"}}]})

        reply = await request_completion("What now?", "INCOMES:\n- Job: $100 (monthly)",
                                         transport=httpx.MockTransport(handler))

        self.assertEqual(reply, "Pay off the card first.")
        self.assertEqual(seen["auth"], "Bearer test-key")
        self.assertEqual(seen["referer"], "https://app.example.com")
        self.assertEqual(seen["title"], "Balance Sheet Tracker")
        self.assertEqual(seen["body"]["max_tokens"], 500)
        self.assertEqual(seen["body"]["messages"][0], {"role": "system", "content": SYSTEM_PROMPT})
        user_prompt = seen["body"]["messages"][1]["content"]
        self.assertIn("INCOMES:\n- Job: $100 (monthly)", user_prompt)
        self.assertIn("My question is: What now?", user_prompt)

    async def test_missing_choices_gives_fallback(self) -> None:
        transport = httpx.MockTransport(lambda request: httpx.Response(200, json={"choices": []}))

        self.assertEqual(await request_completion("q", "", transport=transport), FALLBACK_REPLY)

    async def test_upstream_error_raises(self) -> None:
        transport = httpx.MockTransport(lambda request: httpx.Response(502, text="bad gateway"))

        with self.assertRaises(LLMServiceError):
            await request_completion("q", "", transport=transport)

    async def test_non_json_reply_raises(self) -> None:
        transport = httpx.MockTransport(lambda request: httpx.Response(200, text="<html>oops</html>"))

        with self.assertRaises(LLMServiceError):
            await request_completion("q", "", transport=transport)

    async def test_non_object_reply_raises(self) -> None:
        transport = httpx.MockTransport(lambda request: httpx.Response(200, json=["choices"]))

        with self.assertRaises(LLMServiceError):
            await request_completion("q", "", transport=transport)

    async def test_missing_api_key(self) -> None:
        with mock.patch.object(config, "OPENROUTER_API_KEY", None):
            with self.assertRaises(LLMServiceError):
                await request_completion("q", "")


if __name__ == "__main__":
    unittest.main()
