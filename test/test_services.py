#!/usr/bin/env python3
import os
import sys
import unittest
from unittest.mock import Mock, patch

import requests

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from telegram_relay.config import Settings
from telegram_relay.services import TelegramNotifier


def _response(status_code=200, body=None):
    resp = Mock()
    resp.status_code = status_code
    resp.ok = 200 <= status_code < 300
    resp.text = ""
    if body is None:
        resp.json.side_effect = ValueError("no json")
    else:
        resp.json.return_value = body
    return resp


class TestTelegramNotifier(unittest.TestCase):
    def setUp(self):
        patcher = patch("telegram_relay.services.requests.post")
        self.post = patcher.start()
        self.addCleanup(patcher.stop)
        self.notifier = TelegramNotifier("123:abc", "-1001", timeout=5)

    def test_sends_with_button(self):
        self.post.return_value = _response(200, {"ok": True, "result": {}})

        sent = self.notifier.send_message("<b>hi</b>", "View Project", "https://railway.app")

        self.assertTrue(sent)
        self.post.assert_called_once()
        args, kwargs = self.post.call_args
        self.assertEqual(args[0], "https://api.telegram.org/bot123:abc/sendMessage")
        self.assertEqual(kwargs["timeout"], 5)
        payload = kwargs["json"]
        self.assertEqual(payload["chat_id"], "-1001")
        self.assertEqual(payload["text"], "<b>hi</b>")
        self.assertEqual(payload["parse_mode"], "HTML")
        self.assertTrue(payload["disable_web_page_preview"])
        self.assertEqual(
            payload["reply_markup"],
            {"inline_keyboard": [[{"text": "View Project", "url": "https://railway.app"}]]},
        )

    def test_no_button_without_text_and_url(self):
        self.assertNotIn("reply_markup", self.notifier.build_payload("m"))
        self.assertNotIn("reply_markup", self.notifier.build_payload("m", "View Project", None))
        self.assertNotIn("reply_markup", self.notifier.build_payload("m", None, "https://railway.app"))

    def test_network_error_is_swallowed(self):
        self.post.side_effect = requests.ConnectionError("boom")
        with self.assertLogs("telegram_relay.services", level="ERROR"):
            self.assertFalse(self.notifier.send_message("m"))

    def test_rejected_call_is_swallowed(self):
        self.post.return_value = _response(400, {"ok": False, "description": "Bad Request: chat not found"})
        with self.assertLogs("telegram_relay.services", level="ERROR") as logs:
            self.assertFalse(self.notifier.send_message("m"))
        self.assertIn("chat not found", logs.output[0])
        self.assertNotIn("123:abc", logs.output[0])

    def test_non_json_response_is_failure(self):
        self.post.return_value = _response(502, None)
        with self.assertLogs("telegram_relay.services", level="ERROR"):
            self.assertFalse(self.notifier.send_message("m"))

    def test_from_settings(self):
        settings = Settings(
            telegram_bot_token="t0k",
            telegram_chat_id="42",
            telegram_api_base="http://localhost:8081",
            telegram_timeout_seconds=2.5,
        )
        notifier = TelegramNotifier.from_settings(settings)
        self.post.return_value = _response(200, {"ok": True})
        notifier.send_message("m")
        args, kwargs = self.post.call_args
        self.assertEqual(args[0], "http://localhost:8081/bott0k/sendMessage")
        self.assertEqual(kwargs["timeout"], 2.5)
        self.assertEqual(kwargs["json"]["chat_id"], "42")


if __name__ == '__main__':
    unittest.main()
