"""Tests for email templates and the template registry."""

import pytest

from marketplace import settings
from marketplace.notifications.templates import TEMPLATE_REGISTRY, get_template
from marketplace.notifications.types import NotificationType


class TestRegistry:
    def test_every_notification_type_has_a_template(self):
        assert set(TEMPLATE_REGISTRY) == {t.value for t in NotificationType}

    def test_unknown_type(self):
        with pytest.raises(ValueError):
            get_template("Carrier_Pigeon")


class TestRendering:
    def test_verification_link_points_at_the_frontend(self, monkeypatch):
        monkeypatch.setattr(settings, "FRONTEND_URL", "https://shop.example.com")
        content = get_template(NotificationType.EMAIL_VERIFICATION.value).render({"token": "abc"})
        assert content["subject"] == "Email Verification"
        assert "https://shop.example.com/auth/verify-email?token=abc" in content["body"]

    def test_registration(self):
        content = get_template(NotificationType.REGISTRATION.value).render({"email": "ana@example.com"})
        assert content["subject"] == "Registration Successful"
        assert "ana@example.com" in content["body"]

    def test_account_deleted(self):
        content = get_template(NotificationType.ACCOUNT_DELETED.value).render({"email": "ana@example.com"})
        assert content["subject"] == "Account Deletion"
        assert "contact support" in content["body"]

    @pytest.mark.parametrize(
        "notification_type, subject",
        [
            (NotificationType.PRODUCT_ADDED, "Product Added Successfully"),
            (NotificationType.PRODUCT_UPDATED, "Product Updated"),
            (NotificationType.PRODUCT_DELETED, "Product Deleted"),
        ],
    )
    def test_listing_templates_name_the_product(self, notification_type, subject):
        content = get_template(notification_type.value).render({"product_name": "Tomatoes"})
        assert content["subject"] == subject
        assert "Tomatoes" in content["body"]
