from agrihub.auth.otp import OTPStore, generate_otp


def test_generate_otp_is_numeric_with_requested_length():
    for _ in range(50):
        code = generate_otp(6)
        assert len(code) == 6
        assert code.isdigit()
        assert code[0] != "0"


def test_issue_stores_code_and_pending_payload(otp_store):
    code = otp_store.issue("9000000001", pending_user={"name": "Asha"})

    record = otp_store.get("9000000001")
    assert record.code == code
    assert record.pending_user == {"name": "Asha"}
    assert record.matches(code)


def test_new_code_replaces_previous_one(otp_store):
    first = otp_store.issue("9000000001")
    second = otp_store.issue("9000000001")

    record = otp_store.get("9000000001")
    assert record.code == second
    assert len(otp_store) == 1
    if first != second:
        assert not record.matches(first)


def test_record_expires_after_ttl(otp_store, clock):
    otp_store.issue("9000000001")

    clock.advance(300)
    assert otp_store.get("9000000001") is not None

    clock.advance(1)
    assert otp_store.get("9000000001") is None
    assert len(otp_store) == 0


def test_discard_removes_record(otp_store):
    otp_store.issue("9000000001")
    otp_store.discard("9000000001")
    otp_store.discard("unknown")

    assert otp_store.get("9000000001") is None


def test_custom_length(clock):
    store = OTPStore(ttl_seconds=60, length=4, clock=clock)
    assert len(store.issue("9000000001")) == 4
