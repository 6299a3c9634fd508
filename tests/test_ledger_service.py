import pytest

from errors import NotFound
from models import CreditAction, CreditLock, CreditType
from services import ledger_service


def _append(db, user, kind=CreditType.BUILDING, action=CreditAction.ADD):
     entry = ledger_service.append_credit_transaction(db, user.id, kind, "test", action=action)
     db.commit()
     return entry


def test_count_consumed_only_counts_live_add_rows_of_the_type(db, owner, make_user):
     other = make_user()
     _append(db, owner)
     _append(db, owner)
     _append(db, owner, kind=CreditType.USER)
     _append(db, owner, action=CreditAction.DELETE)
     _append(db, other)

     assert ledger_service.count_consumed(db, owner.id, CreditType.BUILDING) == 2
     assert ledger_service.count_consumed(db, owner.id, CreditType.USER) == 1
     assert ledger_service.count_consumed(db, other.id, CreditType.BUILDING) == 1


def test_soft_delete_excludes_and_restore_includes(db, owner):
     entry = _append(db, owner)
     _append(db, owner)

     ledger_service.soft_delete_transaction(db, entry.id)
     db.commit()
     assert entry.deleted is True
     assert entry.deleted_at is not None
     assert ledger_service.count_consumed(db, owner.id, CreditType.BUILDING) == 1

     ledger_service.restore_transaction(db, entry.id)
     db.commit()
     assert entry.deleted is False
     assert entry.deleted_at is None
     assert ledger_service.count_consumed(db, owner.id, CreditType.BUILDING) == 2


def test_soft_delete_twice_is_not_found(db, owner):
     entry = _append(db, owner)
     ledger_service.soft_delete_transaction(db, entry.id)
     db.commit()

     with pytest.raises(NotFound):
          ledger_service.soft_delete_transaction(db, entry.id)


def test_restore_of_live_row_is_not_found(db, owner):
     entry = _append(db, owner)
     with pytest.raises(NotFound):
          ledger_service.restore_transaction(db, entry.id)


def test_missing_row_is_not_found(db):
     with pytest.raises(NotFound):
          ledger_service.soft_delete_transaction(db, 999)
     with pytest.raises(NotFound):
          ledger_service.get_transaction(db, 999)


def test_list_hides_deleted_rows_unless_asked(db, owner):
     first = _append(db, owner)
     second = _append(db, owner)
     ledger_service.soft_delete_transaction(db, first.id)
     db.commit()

     visible = ledger_service.list_transactions(db, user_id=owner.id)
     assert [entry.id for entry in visible] == [second.id]

     everything = ledger_service.list_transactions(db, user_id=owner.id, include_deleted=True)
     assert {entry.id for entry in everything} == {first.id, second.id}


def test_get_transaction_of_deleted_row_needs_include_deleted(db, owner):
     entry = _append(db, owner)
     ledger_service.soft_delete_transaction(db, entry.id)
     db.commit()

     with pytest.raises(NotFound):
          ledger_service.get_transaction(db, entry.id)
     assert ledger_service.get_transaction(db, entry.id, include_deleted=True).id == entry.id


def test_credit_lock_row_is_created_once_and_bumped(db, owner):
     ledger_service.acquire_credit_lock(db, owner.id, CreditType.BUILDING)
     db.commit()
     ledger_service.acquire_credit_lock(db, owner.id, CreditType.BUILDING)
     db.commit()
     ledger_service.acquire_credit_lock(db, owner.id, CreditType.USER)
     db.commit()
     db.expire_all()

     locks = db.query(CreditLock).filter(CreditLock.user_id == owner.id).all()
     by_type = {lock.type: lock for lock in locks}
     assert len(locks) == 2
     assert by_type[CreditType.BUILDING].version == 2
     assert by_type[CreditType.USER].version == 1
