"""
Serializers for registration, login, account self-service, admin user
management, and password reset.

Request serializers only validate shape; uniqueness and credential checks
belong to ``AccountService`` so every entry point reports them the same
way.
"""

from django.contrib.auth.password_validation import validate_password
from rest_framework import serializers

from apps.media.fields import MediaReferenceField

from .models import User


def username_field(**kwargs):
    return serializers.CharField(
        min_length=3,
        max_length=150,
        error_messages={"min_length": "Username must be at least 3 characters"},
        **kwargs,
    )


def email_field(**kwargs):
    return serializers.EmailField(
        error_messages={"invalid": "Invalid email address"}, **kwargs
    )


def password_field(**kwargs):
    return serializers.CharField(
        write_only=True,
        min_length=6,
        validators=[validate_password],
        error_messages={"min_length": "Password must be at least 6 characters"},
        **kwargs,
    )


def role_field(**kwargs):
    return serializers.ChoiceField(choices=User.Role.choices, **kwargs)


# ---------------------------------------------------------------------------
# Read representation
# ---------------------------------------------------------------------------
class UserSerializer(serializers.ModelSerializer):
    """Public shape of an account; never includes the password hash."""

    profilePicture = MediaReferenceField(source="profile_picture")
    createdAt = serializers.DateTimeField(source="date_joined", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = User
        fields = [
            "id",
            "username",
            "email",
            "role",
            "profilePicture",
            "createdAt",
            "updatedAt",
        ]
        read_only_fields = fields


# ---------------------------------------------------------------------------
# Registration / login
# ---------------------------------------------------------------------------
class RegisterSerializer(serializers.Serializer):
    username = username_field()
    email = email_field()
    password = password_field()
    confirmPassword = serializers.CharField(write_only=True)
    role = role_field(default=User.Role.MUSICIAN)

    def validate(self, attrs):
        if attrs["password"] != attrs["confirmPassword"]:
            raise serializers.ValidationError(
                {"confirmPassword": "Passwords do not match"}
            )
        return attrs


class LoginSerializer(serializers.Serializer):
    email = email_field()
    password = serializers.CharField(write_only=True)


# ---------------------------------------------------------------------------
# Account updates
# ---------------------------------------------------------------------------
class AccountUpdateSerializer(serializers.Serializer):
    """Self-service update; every field optional, role not accepted."""

    username = username_field(required=False)
    email = email_field(required=False)
    password = password_field(required=False)


class AdminUserCreateSerializer(serializers.Serializer):
    username = username_field()
    email = email_field()
    password = password_field()
    role = role_field()


class AdminUserUpdateSerializer(AccountUpdateSerializer):
    role = role_field(required=False)


# ---------------------------------------------------------------------------
# Password reset
# ---------------------------------------------------------------------------
class ForgotPasswordSerializer(serializers.Serializer):
    email = email_field()


class ResetPasswordSerializer(serializers.Serializer):
    password = password_field()
