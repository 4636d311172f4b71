"""
Integration tests for the chatbot endpoint.
"""

from unittest.mock import patch

from fastapi.testclient import TestClient

from app.services.chatbot_service import DEFAULT_RESPONSE, ERROR_RESPONSE, KEYWORD_RESPONSES

RESPONSES = dict(KEYWORD_RESPONSES)


class TestChatbot:

    def test_first_keyword_wins(self, client):
        response = client.post("/chatbot/respond", json={"message": "Hello, do you have books?"})

        assert response.status_code == 200
        assert response.json() == {"response": RESPONSES["hello"]}

    def test_live_count(self, client, seeded):
        response = client.post("/chatbot/respond", json={"message": "how many books do you sell"})

        assert response.status_code == 200
        assert response.json()["response"] == (
            "We currently have 4 books available in our collection across various genres!"
        )

    def test_default_response(self, client):
        response = client.post("/chatbot/respond", json={"message": "Tell me a joke"})
        assert response.json()["response"] == DEFAULT_RESPONSE

    def test_empty_message(self, client):
        response = client.post("/chatbot/respond", json={"message": "   "})

        assert response.status_code == 400
        assert response.json()["message"] == "Message is required"

    def test_missing_message(self, client):
        response = client.post("/chatbot/respond", json={})
        assert response.status_code == 400

    def test_failure_keeps_chat_shape(self, app):
        with patch("app.routes.chatbot.respond", side_effect=RuntimeError("store down")):
            with TestClient(app, raise_server_exceptions=False) as client:
                response = client.post("/chatbot/respond", json={"message": "hello"})

        assert response.status_code == 500
        assert response.json() == {
            "response": "I'm sorry, I'm having some technical difficulties right now. "
                        "Please try again in a moment!"
        }
        assert response.json()["response"] == ERROR_RESPONSE
