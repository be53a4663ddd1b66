"""Unit tests for chat id derivation."""

from oxytalk.domain.value import ChatId, IdentityId, derive_chat_id


class TestDeriveChatId:
    """Tests for derive_chat_id."""

    def test_is_commutative(self):
        """Both argument orders should give the same chat id."""
        alice = IdentityId("alice")
        bob = IdentityId("bob")

        assert derive_chat_id(alice, bob) == derive_chat_id(bob, alice)

    def test_is_deterministic(self):
        """Deriving twice should give equal ids."""
        assert derive_chat_id(IdentityId("a"), IdentityId("b")) == derive_chat_id(
            IdentityId("a"), IdentityId("b")
        )

    def test_distinct_pairs_get_distinct_ids(self):
        """Different pairs should never share a channel."""
        ab = derive_chat_id(IdentityId("a"), IdentityId("b"))
        ac = derive_chat_id(IdentityId("a"), IdentityId("c"))

        assert ab != ac

    def test_separator_in_identity_does_not_collide(self):
        """Identities containing the separator should not alias another pair."""
        first = derive_chat_id(IdentityId("a:b"), IdentityId("c"))
        second = derive_chat_id(IdentityId("a"), IdentityId("b:c"))

        assert first != second

    def test_canonical_format(self):
        """Chat id should be prefixed and list the sorted pair."""
        chat_id = derive_chat_id(IdentityId("zoe"), IdentityId("adam"))

        assert str(chat_id) == "chat:adam:zoe"


class TestChatIdParticipants:
    """Tests for ChatId decomposition."""

    def test_participants_round_trip(self):
        """Participants should be recovered from a derived id."""
        chat_id = derive_chat_id(IdentityId("b:x"), IdentityId("a%y"))

        assert chat_id.participants() == (IdentityId("a%y"), IdentityId("b:x"))

    def test_involves_and_counterpart(self):
        """A participant should be involved and see the other as counterpart."""
        chat_id = derive_chat_id(IdentityId("alice"), IdentityId("bob"))

        assert chat_id.involves(IdentityId("alice"))
        assert not chat_id.involves(IdentityId("carol"))
        assert chat_id.counterpart(IdentityId("alice")) == IdentityId("bob")
        assert chat_id.counterpart(IdentityId("carol")) is None

    def test_malformed_ids_have_no_participants(self):
        """Ids not produced by derive_chat_id should not decompose."""
        for raw in ["", "chat", "chat:alice", "room:alice:bob", "chat:alice:alice"]:
            assert ChatId(raw).participants() is None

    def test_non_canonical_order_is_rejected(self):
        """An unsorted spelling of a valid pair should not be accepted."""
        assert ChatId("chat:bob:alice").participants() is None
        assert not ChatId("chat:bob:alice").involves(IdentityId("alice"))

    def test_usable_as_dict_key(self):
        """Chat ids should hash by value."""
        channels = {derive_chat_id(IdentityId("a"), IdentityId("b")): 1}

        assert channels[ChatId("chat:a:b")] == 1
