"""注册用户测试数据：每个用例独立生成一条随机用户记录
字段与 /api/createAccount 表单参数一一对应
"""
from dataclasses import dataclass, asdict

from faker import Faker

fake = Faker()

TITLES = ["Mr", "Mrs", "Miss"]
DEFAULT_COUNTRY = "United States"

BIRTH_DAY_RANGE = (1, 28)
BIRTH_MONTH_RANGE = (1, 12)
BIRTH_YEAR_RANGE = (1950, 2000)


@dataclass(frozen=True)
class UserData:
    name: str
    email: str
    password: str
    title: str
    birth_date: str
    birth_month: str
    birth_year: str
    firstname: str
    lastname: str
    company: str
    address1: str
    address2: str
    country: str
    zipcode: str
    state: str
    city: str
    mobile_number: str

    def as_form(self) -> dict[str, str]:
        """所有字段按表单参数输出"""
        return asdict(self)


def generate_user_data() -> UserData:
    first_name = fake.first_name()
    last_name = fake.last_name()

    return UserData(
        name=f"{first_name} {last_name}",
        email=fake.email().lower(),
        password=fake.password(length=10),
        title=fake.random_element(TITLES),
        birth_date=str(fake.random_int(*BIRTH_DAY_RANGE)),
        birth_month=str(fake.random_int(*BIRTH_MONTH_RANGE)),
        birth_year=str(fake.random_int(*BIRTH_YEAR_RANGE)),
        firstname=first_name,
        lastname=last_name,
        company=fake.company(),
        address1=fake.street_address(),
        address2=fake.secondary_address(),
        country=DEFAULT_COUNTRY,
        zipcode=fake.zipcode(),
        state=fake.state(),
        city=fake.city(),
        mobile_number=fake.phone_number(),
    )
