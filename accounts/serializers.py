"""
Account serializers: the public user shape plus login and sign-up input.
"""
from rest_framework import serializers
from django.contrib.auth import authenticate

from common.validation import is_valid_password, is_valid_phone
from .models import User


def split_name(name):
    """'Ada Lovelace King' -> ('Ada', 'Lovelace King')."""
    first, _, last = (name or '').strip().partition(' ')
    return first, last.strip()


class UserSerializer(serializers.ModelSerializer):

    class Meta:
        model = User
        fields = (
            'id', 'email', 'username', 'first_name', 'last_name', 'role',
            'phone', 'business_name', 'contact_name', 'created_at',
        )
        read_only_fields = fields


class LoginSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True, style={'input_type': 'password'})

    def validate(self, attrs):
        # USERNAME_FIELD is email, so authenticate() takes it as the username
        user = authenticate(username=attrs['email'], password=attrs['password'])
        if user is None:
            raise serializers.ValidationError('Invalid email or password.')
        if not user.is_active:
            raise serializers.ValidationError('This account has been disabled.')
        attrs['user'] = user
        return attrs


class RegisterSerializer(serializers.Serializer):
    """Self-service sign-up. Admin accounts are created through the Django admin only."""
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True, style={'input_type': 'password'})
    name = serializers.CharField(required=False, allow_blank=True, max_length=255)
    first_name = serializers.CharField(required=False, allow_blank=True, max_length=150)
    last_name = serializers.CharField(required=False, allow_blank=True, max_length=150)
    role = serializers.ChoiceField(
        choices=[User.Role.HOMEOWNER, User.Role.PROVIDER],
        default=User.Role.HOMEOWNER,
    )
    phone = serializers.CharField(required=False, allow_blank=True, max_length=32)
    business_name = serializers.CharField(required=False, allow_blank=True, max_length=255)

    def validate_email(self, value):
        if User.objects.filter(email__iexact=value).exists():
            raise serializers.ValidationError('An account with this email already exists.')
        return value

    def validate_password(self, value):
        if not is_valid_password(value):
            raise serializers.ValidationError(
                'Password must be at least 8 characters and contain a letter and a number.'
            )
        return value

    def validate_phone(self, value):
        if value and not is_valid_phone(value):
            raise serializers.ValidationError('Enter a valid phone number.')
        return value

    def validate(self, attrs):
        attrs['business_name'] = attrs.get('business_name', '').strip()
        if attrs['role'] == User.Role.PROVIDER and not attrs['business_name']:
            raise serializers.ValidationError({'business_name': 'Business name is required for providers.'})
        return attrs

    def create(self, validated_data):
        first, last = split_name(validated_data.pop('name', ''))
        email = validated_data['email']
        return User.objects.create_user(
            username=email,
            email=email,
            password=validated_data['password'],
            first_name=validated_data.get('first_name', '').strip() or first,
            last_name=validated_data.get('last_name', '').strip() or last,
            role=validated_data['role'],
            phone=validated_data.get('phone', ''),
            business_name=validated_data['business_name'],
        )
