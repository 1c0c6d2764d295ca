import jwt

from schemas.user import RegisterUser
from service.user_service import UserService
from tests.test_main import client, test_db, test_db_with_users, session, UtilTest, TEST_PASSWORD
from util import encode_jwt, decode_jwt, hash_password

REGISTER_BODY = {
    'name': 'New Student',
    'email': 'new@example.com',
    'username': 'newstudent',
    'password': 'password1234',
    'birth_date': '2001-02-03',
}


class TestAuthRoute:
    class TestRegister:
        def test_register_should_create_student(self, test_db):
            response = client.post('/auth/register', json=REGISTER_BODY)

            assert response.status_code == 201, response.text
            data = response.json()
            assert data['user']['email'] == 'new@example.com'
            assert data['user']['role'] == 'student'
            assert decode_jwt(data['token'])['id'] == data['user']['id']

        def test_register_should_ignore_requested_role(self, test_db):
            response = client.post('/auth/register', json={**REGISTER_BODY, 'role': 'admin'})

            assert response.status_code == 201, response.text
            assert response.json()['user']['role'] == 'student'

        def test_register_should_return_409_with_duplicated_email(self, test_db_with_users):
            response = client.post('/auth/register', json={**REGISTER_BODY, 'email': 'student3@example.com'})

            assert response.status_code == 409, response.text
            assert response.json() == {'detail': 'Email or username already in use'}

        def test_register_should_return_409_with_duplicated_username(self, test_db_with_users):
            response = client.post('/auth/register', json={**REGISTER_BODY, 'username': 'student3'})

            assert response.status_code == 409, response.text

        def test_register_should_return_422_with_missing_fields(self, test_db):
            response = client.post('/auth/register', json={'email': 'new@example.com'})

            assert response.status_code == 422, response.text

    class TestLogin:
        def test_login_success(self, test_db_with_users):
            response = client.post('/auth/login', json={'email': 'student3@example.com', 'password': TEST_PASSWORD})

            assert response.status_code == 200, response.text
            data = response.json()
            assert data['user']['id'] == 3
            assert decode_jwt(data['token'])['role'] == 'student'

        def test_login_should_return_401_with_wrong_password(self, test_db_with_users):
            response = client.post('/auth/login', json={'email': 'student3@example.com', 'password': 'wrong'})

            assert response.status_code == 401, response.text
            assert response.json() == {'detail': 'Invalid credentials'}

        def test_login_should_return_401_with_unknown_email(self, test_db_with_users):
            response = client.post('/auth/login', json={'email': 'nobody@example.com', 'password': TEST_PASSWORD})

            assert response.status_code == 401, response.text


class TestUserRoute:
    class TestGetUsers:
        def test_get_users_should_return_empty_list_with_no_user_data(self, test_db):
            response = client.get('/users/')

            assert response.status_code == 200, response.text
            assert response.json() == []

        def test_get_users_should_not_expose_password(self, test_db_with_users):
            response = client.get('/users/')

            assert response.status_code == 200, response.text
            data = response.json()
            assert len(data) == 7
            assert all('password_hash' not in user for user in data)

        def test_get_teachers(self, test_db_with_users):
            response = client.get('/users/teachers')

            assert response.status_code == 200, response.text
            assert [teacher['id'] for teacher in response.json()] == [2]

    class TestCreateUser:
        def test_create_user_should_return_401_with_no_token(self, test_db_with_users):
            response = client.post('/users/', json={**REGISTER_BODY, 'role': 'teacher'})

            assert response.status_code == 401, response.text
            assert response.json() == {'detail': 'Token not provided'}

        def test_create_user_should_return_401_with_invalid_token(self, test_db_with_users):
            response = client.post('/users/', json={**REGISTER_BODY, 'role': 'teacher'},
                                   headers={'Authorization': 'Bearer invalid_token'})

            assert response.status_code == 401, response.text
            assert response.json() == {'detail': 'Invalid token'}

        def test_create_user_should_return_401_with_token_signed_by_other_key(self, test_db_with_users):
            token = jwt.encode({'id': 1, 'role': 'admin'}, 'change-me-in-production-please-32b', algorithm='HS256')

            response = client.post('/users/', json={**REGISTER_BODY, 'role': 'admin'},
                                   headers={'Authorization': f'Bearer {token}'})

            assert response.status_code == 401, response.text
            assert response.json() == {'detail': 'Invalid token'}
            assert len(client.get('/users/').json()) == 7

        def test_create_user_should_return_403_for_non_admin_user(self, test_db_with_users):
            token = encode_jwt(3, 'student')

            response = client.post('/users/', json={**REGISTER_BODY, 'role': 'teacher'},
                                   headers={'Authorization': f'Bearer {token}'})

            assert response.status_code == 403, response.text
            assert response.json() == {'detail': 'Admin access only'}

        def test_create_user_should_reject_student_role(self, test_db_with_users):
            token = encode_jwt(1, 'admin')

            response = client.post('/users/', json={**REGISTER_BODY, 'role': 'student'},
                                   headers={'Authorization': f'Bearer {token}'})

            assert response.status_code == 422, response.text

        def test_create_user_success(self, test_db_with_users):
            token = encode_jwt(1, 'admin')

            response = client.post('/users/', json={**REGISTER_BODY, 'role': 'teacher'},
                                   headers={'Authorization': f'Bearer {token}'})

            assert response.status_code == 201, response.text
            assert response.json()['role'] == 'teacher'

            teachers = client.get('/users/teachers').json()
            assert [teacher['email'] for teacher in teachers] == ['teacher@example.com', 'new@example.com']

    class TestGetUserReservations:
        def test_get_user_reservations_should_return_404_for_unknown_user(self, test_db_with_users):
            response = client.get('/users/999/reservations')

            assert response.status_code == 404, response.text

        def test_get_user_reservations_should_return_only_confirmed(self, test_db_with_users):
            UtilTest.insert_class(1, capacity=5, name='Yoga')
            UtilTest.insert_class(2, capacity=5, name='Pilates')
            UtilTest.insert_reservation(1, 3)
            UtilTest.insert_reservation(2, 3, status='cancelled')

            response = client.get('/users/3/reservations')

            assert response.status_code == 200, response.text
            confirmed = response.json()['confirmed']
            assert len(confirmed) == 1
            assert confirmed[0]['class_id'] == 1
            assert confirmed[0]['class_name'] == 'Yoga'
            assert confirmed[0]['teacher'] == {'id': 2, 'name': 'Teacher', 'username': 'teacher'}


class TestUserService:
    def test_register_should_hash_password_outside_transaction(self, test_db, session, monkeypatch):
        in_transaction = []

        def tracking_hash(password):
            in_transaction.append(session.in_transaction())
            return hash_password(password)

        monkeypatch.setattr('service.user_service.hash_password', tracking_hash)

        output = UserService(session).register(RegisterUser(**REGISTER_BODY))

        assert output.user.role == 'student'
        assert in_transaction == [False]
