import pytest

pytestmark = pytest.mark.unit


class TestSensitiveDataMasking:
    def test_phone_masked(self):
        from config.settings import mask_sensitive_data

        event_dict = {"event": "test", "phone": "+380501234567"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "+380501234567" not in result["phone"]
        assert "***MASKED***" in result["phone"]

    def test_phone_inside_text_masked(self):
        from config.settings import mask_sensitive_data

        event_dict = {"event": "test", "note": "call +380671112233 after 5pm"}
        result = mask_sensitive_data(None, None, event_dict)
        assert result["note"] == "call ***MASKED*** after 5pm"

    def test_password_masked(self):
        from config.settings import mask_sensitive_data

        event_dict = {"event": "test", "data": "password='s3cret123'"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "s3cret123" not in result["data"]
        assert "***MASKED***" in result["data"]

    def test_token_masked(self):
        from config.settings import mask_sensitive_data

        event_dict = {"event": "test", "header": "token=abc123xyz"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "abc123xyz" not in result["header"]
        assert "***MASKED***" in result["header"]

    def test_non_sensitive_data_unchanged(self):
        from config.settings import mask_sensitive_data

        event_dict = {"event": "pastry.created", "pastry_id": "17"}
        result = mask_sensitive_data(None, None, event_dict)
        assert result["pastry_id"] == "17"
        assert result["event"] == "pastry.created"
