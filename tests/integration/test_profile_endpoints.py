from datetime import timedelta


def test_trainee_profile(client, trainee_headers, test_trainee):
    response = client.get("/api/trainees/profile", headers=trainee_headers)

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["id"] == test_trainee.id
    assert data["age"] == 25
    assert data["user"]["email"] == "trainee@gym.com"


def test_update_trainee_profile(client, trainee_headers, test_trainee):
    response = client.put(
        "/api/trainees/profile",
        json={"age": 31, "phone": "+15551234567", "name": "Renamed Trainee"},
        headers=trainee_headers,
    )

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["age"] == 31
    assert data["user"]["phone"] == "+15551234567"
    assert data["user"]["name"] == "Renamed Trainee"


def test_partial_update_keeps_other_fields(client, trainee_headers, test_trainee):
    response = client.put("/api/trainees/profile", json={"phone": "+15551234567"}, headers=trainee_headers)

    data = response.json()["data"]
    assert data["age"] == 25
    assert data["user"]["name"] == "First Trainee"


def test_trainee_age_out_of_range(client, trainee_headers, test_trainee):
    response = client.put("/api/trainees/profile", json={"age": 0}, headers=trainee_headers)

    assert response.status_code == 400


def test_trainer_cannot_read_trainee_profile(client, trainer_headers):
    assert client.get("/api/trainees/profile", headers=trainer_headers).status_code == 403


def test_trainer_profile(client, trainer_headers, test_trainer):
    response = client.get("/api/trainers/profile", headers=trainer_headers)

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["specialization"] == "Yoga"
    assert data["experience"] == 5
    assert data["userId"] == test_trainer.user_id


def test_update_trainer_profile(client, trainer_headers, test_trainer):
    response = client.put(
        "/api/trainers/profile",
        json={"specialization": "Pilates", "experience": 7, "bio": "Core strength first."},
        headers=trainer_headers,
    )

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["specialization"] == "Pilates"
    assert data["experience"] == 7
    assert data["bio"] == "Core strength first."


def test_trainer_experience_limit(client, trainer_headers, test_trainer):
    response = client.put("/api/trainers/profile", json={"experience": 51}, headers=trainer_headers)

    assert response.status_code == 400


def test_trainer_schedules_lists_own_classes(
    client, trainer_headers, trainee_headers, create_schedule, test_second_trainer, class_date
):
    own_later = create_schedule(start_time="09:00", end_time="11:00", schedule_date=class_date + timedelta(days=1))
    own = create_schedule(start_time="09:00", end_time="11:00")
    create_schedule(start_time="13:00", end_time="15:00", trainer=test_second_trainer)
    client.post("/api/bookings/book", json={"scheduleId": own.id}, headers=trainee_headers)

    response = client.get("/api/trainers/schedules", headers=trainer_headers)

    assert response.status_code == 200
    data = response.json()["data"]
    assert [schedule["id"] for schedule in data] == [own.id, own_later.id]
    assert data[0]["currentBookings"] == 1
    assert data[0]["activeBookings"][0]["trainee"]["user"]["name"] == "First Trainee"
