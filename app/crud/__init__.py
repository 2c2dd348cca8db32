from .user import (
    get_user_by_id,
    get_user_by_email,
    get_all_users,
    create_user,
    update_user_contact,
)
from .trainer import get_trainer, get_trainer_by_user_id, update_trainer_profile
from .trainee import get_trainee_by_user_id, update_trainee_profile, claim_booking_version
from .class_schedule import (
    get_schedule,
    get_schedules,
    count_schedules_on_date,
    get_overlapping_trainer_schedule,
    create_schedule,
    count_active_bookings,
    delete_schedule,
)
from .booking import (
    get_booking,
    get_active_booking,
    get_active_bookings_on_date,
    get_trainee_bookings,
    get_all_bookings,
    create_booking,
    mark_booking_cancelled,
    reserve_seat,
    release_seat,
)
