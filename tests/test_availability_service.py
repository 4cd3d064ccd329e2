from app.models import Mission, MissionStatus
from app.schemas.mission import MissionCreateRequest
from app.services.availability_service import availability_service
from app.services.mission_service import mission_service


def _create(db, seeded, driver="A", engineers=()):
    return mission_service.create_mission(db, MissionCreateRequest(
        driver_id=seeded[driver].id,
        vehicle_id=seeded["V"].id,
        engineers=[{"id": e.id, "name": e.name} for e in engineers],
        start_time="09:00",
        end_time="18:00",
    ))


def _ids(rows):
    return sorted(r.id for r in rows)


def test_everything_is_available_without_missions(db, seeded):
    assert _ids(availability_service.available_drivers(db)) == _ids([seeded["A"], seeded["B"]])
    assert _ids(availability_service.available_vehicles(db)) == [seeded["V"].id]
    assert _ids(availability_service.available_engineers(db)) == _ids(seeded["engineers"])


def test_active_mission_blocks_driver_until_completed(db, seeded):
    mission_id = _create(db, seeded)

    assert _ids(availability_service.available_drivers(db)) == [seeded["B"].id]
    assert availability_service.available_vehicles(db) == []

    mission_service.complete_mission(db, mission_id)

    assert _ids(availability_service.available_drivers(db)) == _ids([seeded["A"], seeded["B"]])
    assert _ids(availability_service.available_vehicles(db)) == [seeded["V"].id]


def test_deleted_mission_frees_its_resources(db, seeded):
    mission_id = _create(db, seeded, engineers=seeded["engineers"][:1])
    mission_service.delete_mission(db, mission_id)

    assert len(availability_service.available_drivers(db)) == 2
    assert len(availability_service.available_engineers(db)) == 3


def test_engineers_on_active_missions_are_excluded(db, seeded):
    e1, e2, e3 = seeded["engineers"]
    _create(db, seeded, driver="A", engineers=[e1])
    done = _create(db, seeded, driver="B", engineers=[e2, e3])
    mission_service.complete_mission(db, done)

    assert _ids(availability_service.available_engineers(db)) == _ids([e2, e3])


def test_malformed_snapshots_are_skipped(db, seeded):
    e1, e2, e3 = seeded["engineers"]
    for raw in ("not json", '{"id": 1}', '[{"name": "no id"}]'):
        db.add(Mission(driver_id=seeded["A"].id, vehicle_id=seeded["V"].id, engineers=raw,
                       start_time="s", end_time="e", status=MissionStatus.ACTIVE))
    db.commit()
    _create(db, seeded, driver="B", engineers=[e3])

    assert _ids(availability_service.available_engineers(db)) == _ids([e1, e2])


def test_completed_missions_do_not_count(db, seeded):
    db.add(Mission(driver_id=seeded["A"].id, vehicle_id=seeded["V"].id,
                   engineers=f'[{{"id": {seeded["engineers"][0].id}}}]',
                   start_time="s", end_time="e", status=MissionStatus.COMPLETED))
    db.commit()

    assert len(availability_service.available_drivers(db)) == 2
    assert len(availability_service.available_vehicles(db)) == 1
    assert len(availability_service.available_engineers(db)) == 3


def test_ids_are_collected_from_partially_valid_snapshots(db, seeded):
    e1, e2, e3 = seeded["engineers"]
    db.add(Mission(driver_id=seeded["A"].id, vehicle_id=seeded["V"].id,
                   engineers=f'[{{"id": {e1.id}}}, {{"name": "legacy"}}, 7, {{"id": "{e2.id}"}}]',
                   start_time="s", end_time="e", status=MissionStatus.ACTIVE))
    db.commit()

    assert _ids(availability_service.available_engineers(db)) == _ids([e2, e3])
