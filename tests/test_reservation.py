from tests.test_main import client, test_db, test_db_with_users, UtilTest


class TestReservationRoute:
    class TestBookClass:
        def test_book_class_should_return_400_without_user_id(self, test_db_with_users):
            UtilTest.insert_class(1, capacity=1)

            response = client.post('/classes/1/book', json={})

            assert response.status_code == 400, response.text
            assert response.json() == {'detail': 'user_id is required'}

        def test_book_class_should_return_400_with_zero_user_id(self, test_db_with_users):
            UtilTest.insert_class(1, capacity=1)

            response = client.post('/classes/1/book', json={'user_id': 0})

            assert response.status_code == 400, response.text
            assert response.json() == {'detail': 'user_id is required'}

        def test_book_class_should_return_404_for_unknown_class(self, test_db_with_users):
            response = client.post('/classes/999/book', json={'user_id': 3})

            assert response.status_code == 404, response.text
            assert response.json() == {'detail': 'Class not found'}

        def test_book_class_should_confirm_reservation(self, test_db_with_users):
            UtilTest.insert_class(1, capacity=1)

            response = client.post('/classes/1/book', json={'user_id': 3})

            assert response.status_code == 201, response.text
            data = response.json()
            assert data['message'] == 'Reservation confirmed'
            assert data['reservation']['user_id'] == 3
            assert data['reservation']['class_id'] == 1
            assert data['reservation']['status'] == 'confirmed'

        def test_book_class_should_accept_camel_case_user_id(self, test_db_with_users):
            UtilTest.insert_class(1, capacity=1)

            response = client.post('/classes/1/book', json={'userId': 3})

            assert response.status_code == 201, response.text

        def test_book_class_should_add_user_to_waitlist_when_full(self, test_db_with_users):
            UtilTest.insert_class(1, capacity=1)
            UtilTest.insert_reservation(1, 3)

            response = client.post('/classes/1/book', json={'user_id': 4})

            assert response.status_code == 201, response.text
            data = response.json()
            assert data['message'] == 'Class is full, user added to waitlist'
            assert data['waitlist']['user_id'] == 4
            assert data['waitlist']['position'] == 1

        def test_book_class_should_return_400_when_user_already_booked(self, test_db_with_users):
            UtilTest.insert_class(1, capacity=2)
            UtilTest.insert_reservation(1, 3)

            response = client.post('/classes/1/book', json={'user_id': 3})

            assert response.status_code == 400, response.text
            assert response.json() == {'detail': 'User already booked this class'}

        def test_book_class_should_return_400_when_user_already_in_waitlist(self, test_db_with_users):
            UtilTest.insert_class(1, capacity=1)
            UtilTest.insert_reservation(1, 3)
            UtilTest.insert_waitlist_entry(1, 4, 1)

            response = client.post('/classes/1/book', json={'user_id': 4})

            assert response.status_code == 400, response.text
            assert response.json() == {'detail': 'User already in waitlist'}

        def test_book_class_should_return_409_for_unknown_user(self, test_db_with_users):
            UtilTest.insert_class(1, capacity=1)

            response = client.post('/classes/1/book', json={'user_id': 999})

            assert response.status_code == 409, response.text

    class TestCancelReservation:
        def test_cancel_should_return_400_when_reservation_not_found(self, test_db_with_users):
            UtilTest.insert_class(1, capacity=1)

            response = client.post('/classes/1/cancel', json={'user_id': 3})

            assert response.status_code == 400, response.text
            assert response.json() == {'detail': 'Reservation not found or already cancelled'}

        def test_cancel_should_return_400_for_unknown_class(self, test_db_with_users):
            response = client.post('/classes/999/cancel', json={'user_id': 3})

            assert response.status_code == 400, response.text

        def test_cancel_without_waitlist(self, test_db_with_users):
            UtilTest.insert_class(1, capacity=1)
            reservation_id = UtilTest.insert_reservation(1, 3)

            response = client.post('/classes/1/cancel', json={'userId': 3})

            assert response.status_code == 200, response.text
            data = response.json()
            assert data['message'] == 'Reservation cancelled successfully'
            assert data['cancelled_reservation']['id'] == reservation_id
            assert data['cancelled_reservation']['status'] == 'cancelled'
            assert data['promoted_reservation'] is None

        def test_cancel_should_promote_first_user_in_waitlist(self, test_db_with_users):
            UtilTest.insert_class(1, capacity=1)
            client.post('/classes/1/book', json={'user_id': 3})
            client.post('/classes/1/book', json={'user_id': 4})
            client.post('/classes/1/book', json={'user_id': 5})

            response = client.post('/classes/1/cancel', json={'user_id': 3})

            assert response.status_code == 200, response.text
            assert response.json()['promoted_reservation']['user_id'] == 4

            roster = client.get('/classes/1').json()
            assert roster['confirmed_reservations'] == 1
            assert roster['available_spots'] == 0
            assert roster['reservations'][0]['user_id'] == 4
            assert [(entry['user_id'], entry['position']) for entry in roster['waitlist']] == [(5, 1)]
            assert UtilTest.get_reservations(1) == [(3, 'cancelled'), (4, 'confirmed')]

        def test_cancelled_user_cannot_book_again(self, test_db_with_users):
            UtilTest.insert_class(1, capacity=1)
            client.post('/classes/1/book', json={'user_id': 3})
            client.post('/classes/1/cancel', json={'user_id': 3})

            response = client.post('/classes/1/book', json={'user_id': 3})

            assert response.status_code == 400, response.text
            assert response.json() == {'detail': 'User already booked this class'}

        def test_cancel_twice_should_return_400(self, test_db_with_users):
            UtilTest.insert_class(1, capacity=1)
            UtilTest.insert_reservation(1, 3)

            client.post('/classes/1/cancel', json={'user_id': 3})
            response = client.post('/classes/1/cancel', json={'user_id': 3})

            assert response.status_code == 400, response.text
