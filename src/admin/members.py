from typing import Optional

from admin.prompter import Prompter
from config import Config, CLIENT_CODE_SEQUENCE, CLIENT_CODE_PREFIX, CLIENT_CODES_COLLECTION, \
    MEMBERS_COLLECTION, DEFAULT_TEST_CLIENT_CODE
from members import ClientCode, Member
from repos import RecordExists
from repos.client_codes import ClientCodesRepo
from repos.members import MembersRepo
from repos.sequences import SequenceRepo
from utils import date_utils, loghelper, string_utils
from utils.string_utils import format_identifier

logger = loghelper.get_logger(__name__)

TEST_CODE_PREFIX = "TEST"


def build_test_member(client_code: str = DEFAULT_TEST_CLIENT_CODE, subscription_days: int = 30) -> Member:
    return Member(
        client_code=client_code,
        full_name='Test Member',
        email='test@example.com',
        join_date=date_utils.now(),
        subscription_end_date=date_utils.days_from_now(subscription_days),
        age=25,
        sex='M',
        primary_phone='+1234567890',
        address='123 Test Street',
        emergency_contact='+1987654321'
    )


class MemberAdmin:
    def __init__(self, sequence_repo: SequenceRepo,
                 client_codes_repo: ClientCodesRepo,
                 members_repo: MembersRepo,
                 config: Config,
                 prompter: Prompter):
        self.sequence_repo = sequence_repo
        self.client_codes_repo = client_codes_repo
        self.members_repo = members_repo
        self.config = config
        self.prompter = prompter

    def next_client_code(self) -> str:
        value = self.sequence_repo.allocate(CLIENT_CODE_SEQUENCE)
        return format_identifier(CLIENT_CODE_PREFIX, value, self.config.identifier_digits)

    def collect_client_code(self, code: str) -> ClientCode:
        p = self.prompter
        full_name = p.prompt("Full Name")
        age = p.prompt_int("Age", minimum=0)
        sex = p.prompt("Sex (M/F/Other)")
        email = p.prompt_required("Email (for login & communication)")
        primary_phone = p.prompt("Primary Phone")
        address = p.prompt("Address")
        emergency_contact = p.prompt("Emergency Contact Phone")
        date_of_birth = p.prompt_date("Date of Birth (YYYY-MM-DD)")
        membership_status = p.prompt("Membership Status (e.g., active, pending_activation)",
                                     self.config.membership_status)
        role = p.prompt("Role (e.g., member, coach)", self.config.member_role)
        subscription_days = p.prompt_int("Subscription duration in days (e.g., 30, 365)",
                                         self.config.subscription_days,
                                         fallback_to_default=True,
                                         minimum=1)
        return ClientCode(
            code,
            email,
            full_name,
            join_date=date_utils.now(),
            subscription_end_date=date_utils.days_from_now(subscription_days),
            age=age,
            sex=sex,
            primary_phone=primary_phone,
            address=address,
            emergency_contact=emergency_contact,
            date_of_birth=date_of_birth,
            membership_status=membership_status,
            role=role
        )

    def add_new_member(self, confirm: bool = True) -> Optional[ClientCode]:
        """
        Allocates a client code, prompts for the member details and writes the client code.

        The member record itself is created by the member application when the code is claimed.

        :param confirm: whether to show the details and ask before writing them.
        :return: the client code written, or None if the user declined.
        :raises StoreUnavailable: if the code could not be allocated or the details could not be written.
        :raises RecordExists: if the allocated code already exists.
        """
        code = self.next_client_code()
        self.prompter.say(f"Generated Client Code: {code}")
        client_code = self.collect_client_code(code)
        if confirm:
            self.prompter.say()
            self.prompter.say(client_code.describe())
            if not self.prompter.prompt_yes("Add this member?"):
                self.prompter.say(f"Client code '{code}' was not added.")
                return None

        if not self.client_codes_repo.create(client_code):
            raise RecordExists(CLIENT_CODES_COLLECTION, code)
        logger.info(f"Added client code {code}.")
        self.prompter.say(f"Client code '{code}' with member details created in '{CLIENT_CODES_COLLECTION}'.")
        self.prompter.say(f"\nMember can now sign up using Client Code: {code} and Email: {client_code.email}")
        self.prompter.say(f"The application will create the corresponding record in '{MEMBERS_COLLECTION}' "
                          f"upon successful signup.")
        return client_code

    def create_test_member(self, random_code: bool = False, confirm: bool = True) -> Optional[Member]:
        """
        Writes the test member, replacing any existing one with the same code.

        :param random_code: use a random code (i.e. TESTX4K9QZ) instead of the fixed one.
        :param confirm: whether to ask before writing.
        """
        code = TEST_CODE_PREFIX + string_utils.generate_code(6) if random_code else DEFAULT_TEST_CLIENT_CODE
        member = build_test_member(code, self.config.subscription_days)
        if confirm and not self.prompter.prompt_yes(f"Write test member '{code}' to '{MEMBERS_COLLECTION}'?"):
            self.prompter.say("Test member was not created.")
            return None
        self.members_repo.replace(member)
        logger.info(f"Created test member {code}.")
        self.prompter.say(f"Test member '{code}' created successfully.")
        return member
