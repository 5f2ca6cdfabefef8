"""Tests for acme_linode.models."""


def test_challenge_request_from_dict():
    from acme_linode.models import ChallengeRequest

    ch = ChallengeRequest.from_dict(
        {
            "uid": "abc-123",
            "action": "Present",
            "type": "dns-01",
            "dnsName": "example.com",
            "key": "token-value",
            "resourceNamespace": "default",
            "resolvedFQDN": "_acme-challenge.example.com.",
            "resolvedZone": "example.com.",
            "allowAmbientCredentials": False,
            "config": {"apiKeySecretRef": {"name": "creds", "key": "token"}},
        }
    )
    assert ch.uid == "abc-123"
    assert ch.action == "Present"
    assert ch.dns_name == "example.com"
    assert ch.key == "token-value"
    assert ch.resource_namespace == "default"
    assert ch.resolved_fqdn == "_acme-challenge.example.com."
    assert ch.resolved_zone == "example.com."
    assert ch.config == {"apiKeySecretRef": {"name": "creds", "key": "token"}}


def test_challenge_request_from_dict_optional_fields():
    from acme_linode.models import ChallengeRequest

    ch = ChallengeRequest.from_dict(
        {
            "key": "k",
            "resolvedFQDN": "_acme-challenge.example.com.",
            "resolvedZone": "example.com.",
        }
    )
    assert ch.config is None
    assert ch.resource_namespace == ""
    assert ch.type == "dns-01"
    assert ch.allow_ambient_credentials is False


def test_secret_key_ref_validity():
    from acme_linode.models import SecretKeyRef

    assert SecretKeyRef(name="creds", key="token").is_valid()
    assert not SecretKeyRef(name="creds").is_valid()
    assert not SecretKeyRef(key="token").is_valid()
    assert not SecretKeyRef().is_valid()


def test_secret_key_ref_from_dict_missing_fields():
    from acme_linode.models import SecretKeyRef

    assert SecretKeyRef.from_dict({"name": "creds"}) == SecretKeyRef(name="creds", key="")
    assert SecretKeyRef.from_dict(None) == SecretKeyRef()


def test_zone_from_dict():
    from acme_linode.models import Zone

    zone = Zone.from_dict({"id": 1234, "domain": "example.com", "type": "master", "status": "active"})
    assert zone == Zone(id=1234, domain="example.com")


def test_record_from_dict():
    from acme_linode.models import Record

    record = Record.from_dict(
        {"id": 55, "name": "_acme-challenge", "type": "TXT", "target": "abc", "ttl_sec": 180, "weight": 1}
    )
    assert record.id == 55
    assert record.name == "_acme-challenge"
    assert record.type == "TXT"
    assert record.target == "abc"
    assert record.ttl_sec == 180
