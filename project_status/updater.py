import logging


class StatusUpdater:
    """Moves candidates to one status option, one mutation at a time.

    Updates are not rolled back: when a mutation fails its error propagates,
    earlier items keep their new status and later ones are never attempted.
    """

    def __init__(self, manager, project_id, field_id, option_id):
        self.__manager = manager
        self.__project_id = project_id
        self.__field_id = field_id
        self.__option_id = option_id

    def update(self, candidates):
        updated = []
        for candidate in candidates:
            self.__manager.move_item_to_status(self.__project_id, candidate.item_id, self.__field_id, self.__option_id)
            logging.info(f"item {candidate.item_id} moved from {candidate.current_value} to {self.__option_id}")
            updated.append(candidate.item_id)
        return updated
