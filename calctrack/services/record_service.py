# calctrack/services/record_service.py
from ..repositories.factory import get_storage
from ..utils.exceptions import NotFoundError
from ..utils.logger import setup_logger


class OwnedRecordService:
    """CRUD over records that belong to a single user.

    A record that is missing and a record owned by someone else both raise
    ``NotFoundError``, so callers cannot probe for other users' ids.
    Subclasses bind ``kind`` and the storage calls.
    """

    kind = 'Record'

    def __init__(self, storage=None):
        self.storage = storage or get_storage()
        self.logger = setup_logger()

    def _get(self, record_id):
        raise NotImplementedError

    def _list(self, user_id):
        raise NotImplementedError

    def _create(self, **fields):
        raise NotImplementedError

    def _update(self, record_id, changes):
        raise NotImplementedError

    def _delete(self, record_id):
        raise NotImplementedError

    def list_for(self, user):
        return self._list(user.id)

    def create_for(self, user, data):
        fields = dict(data)
        fields['user_id'] = user.id
        record = self._create(**fields)
        self.logger.info(f"Service: {self.kind} {record.id} created by {user.username}")
        return record

    def get_owned(self, user, record_id):
        record = self._get(record_id)
        if record is None or record.user_id != user.id:
            raise NotFoundError(f"{self.kind} not found")
        return record

    def update_owned(self, user, record_id, changes):
        self.get_owned(user, record_id)
        updated = self._update(record_id, dict(changes))
        if updated is None:
            # deleted between the ownership check and the write
            raise NotFoundError(f"{self.kind} not found")
        self.logger.info(f"Service: {self.kind} {record_id} updated")
        return updated

    def delete_owned(self, user, record_id):
        self.get_owned(user, record_id)
        self._delete(record_id)
        self.logger.info(f"Service: {self.kind} {record_id} deleted")


class CalculationService(OwnedRecordService):
    kind = 'Calculation'

    def _get(self, record_id):
        return self.storage.get_calculation(record_id)

    def _list(self, user_id):
        return self.storage.get_calculations_by_user(user_id)

    def _create(self, **fields):
        return self.storage.create_calculation(**fields)

    def _update(self, record_id, changes):
        return self.storage.update_calculation(record_id, changes)

    def _delete(self, record_id):
        return self.storage.delete_calculation(record_id)


class ProjectService(OwnedRecordService):
    kind = 'Project'

    def _get(self, record_id):
        return self.storage.get_project(record_id)

    def _list(self, user_id):
        return self.storage.get_projects_by_user(user_id)

    def _create(self, **fields):
        return self.storage.create_project(**fields)

    def _update(self, record_id, changes):
        return self.storage.update_project(record_id, changes)

    def _delete(self, record_id):
        return self.storage.delete_project(record_id)
